"""API package - HTTP host for the planning services"""
