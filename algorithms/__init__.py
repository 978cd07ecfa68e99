"""Optimization algorithms built on SwarmCore."""
