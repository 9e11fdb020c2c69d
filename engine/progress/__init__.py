"""
Progress packages for percent-of-journey scoring, goal progress summaries and milestone generation.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.progress.score import score_progress, summarize
from engine.progress.milestones import build_milestones

__all__ = ["score_progress", "summarize", "build_milestones"]
