"""
AI Content Detection Layer - Provider Ensemble
===============================================

Queries several independent "is this AI-written" signal sources concurrently
and fuses whatever succeeded into one bounded result.
"""

__version__ = "1.0.0"

# Imports are done directly in each module to avoid circular dependencies
# Use: from detection.schemas import AnalysisRequest
# Use: from detection.orchestrator import DetectionOrchestrator
