"""
Core of themegen: input loading, color resolution, project configuration
and the generation orchestrator.
"""
