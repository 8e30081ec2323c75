"""
Scenario Loading Module
"""
from .loader import ScenarioSpec, ScenarioError, load_scenario, build_manager

__all__ = ['ScenarioSpec', 'ScenarioError', 'load_scenario', 'build_manager']
