"""
Rate estimation packages: windowed weekly trend from checkpoints and the energy-balance fallback rate injected by weight goals.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.rate.weekly import estimate_weekly_rate
from engine.rate.fallback import energy_balance_rate, plan_rate

__all__ = ["estimate_weekly_rate", "energy_balance_rate", "plan_rate"]
