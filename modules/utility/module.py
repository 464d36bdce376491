from multibot import Configuration, Module


class UtilityModule(Module):
    name = "Utility"
    identifier = "utility"
    version = "1.2.0"
    description = "Latency check and echo commands"
    configuration = Configuration(
        global_settings={
            "excellent_latency": 100,
            "good_latency": 200,
            "fair_latency": 300,
        },
        guild_settings={
            "say_delete_invocation": True,
        },
    )
