"""Generators and the numeric contexts they compute in."""
