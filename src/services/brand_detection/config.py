"""
Configuration and constants for brand detection.

This module contains environment-driven feature flags and the hand-tuned
thresholds used throughout the detection pipeline.
"""

import os


# Environment variables and feature flags
ENABLE_MODEL_DISCOVERY = os.getenv("ENABLE_MODEL_DISCOVERY", "false").lower() == "true"
ENABLE_HEURISTIC_DISCOVERY_FALLBACK = os.getenv("ENABLE_HEURISTIC_DISCOVERY_FALLBACK", "true").lower() == "true"
ENABLE_TEXT_PREPROCESSING = os.getenv("ENABLE_TEXT_PREPROCESSING", "true").lower() == "true"
ENABLE_MENTION_SENTIMENT = os.getenv("ENABLE_MENTION_SENTIMENT", "true").lower() == "true"

# Normalization
MIN_NORMALIZATION_CONFIDENCE = 0.3
MIN_CANDIDATE_KEEP_CONFIDENCE = 0.4
CONTAINMENT_MIN_LENGTH = 4
EDIT_SIMILARITY_MIN_LENGTH = 5
EDIT_SIMILARITY_THRESHOLD = 0.85

# Extraction and validation
MIN_CANDIDATE_LENGTH = 2
MAX_CANDIDATE_LENGTH = 30
MIN_EVIDENCE_MENTIONS = 2
NEGATIVE_CONTEXT_WINDOW = 50

# Classification
BASE_CANDIDATE_CONFIDENCE = 0.6
CANDIDATE_CONFIDENCE_THRESHOLD = 0.6
CONSENSUS_BOOST = 0.15
SHORT_NAME_PENALTY = 0.2
SHORT_NAME_LENGTH = 3
MAX_COMPETITORS = 20
MAX_COMPETITOR_NAME_LENGTH = 50

# Model-assisted discovery
DISCOVERY_BATCH_SIZE = 20
DISCOVERY_CONFIDENCE_THRESHOLD = float(os.getenv("DISCOVERY_CONFIDENCE_THRESHOLD", "0.8"))
DISCOVERY_CONTEXT_CHARS = 2000
DISCOVERY_FALLBACK_CONFIDENCE = 0.75
HEURISTIC_DISCOVERY_CONFIDENCE = 0.7

# Reporting
ANALYSIS_HASH_TEXT_CHARS = 200
