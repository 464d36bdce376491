"""Management Module - Role management commands"""
