"""Utility Module - Latency and echo commands"""
