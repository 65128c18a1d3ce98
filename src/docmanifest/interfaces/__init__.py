"""Interfaces: command line."""
