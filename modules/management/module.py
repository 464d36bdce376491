from multibot import Configuration, Module


class ManagementModule(Module):
    name = "Management"
    identifier = "management"
    version = "1.0.0"
    description = "Role management commands"
    dependencies = ("core",)
    configuration = Configuration(
        guild_settings={
            "join_role": 0,
        },
    )
    guild_setup_enabled = True
