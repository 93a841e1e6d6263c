"""Integrator, parallel render driver and tone mapping."""
