#!/usr/bin/env python3
# Copyright 2025 The portfolioai Authors
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Command-line interface for portfolioai.

Two-phase architecture:
1. Gather user requirements (parse args) -> UserConfig
2. Execute the command (extract, render or templates)
"""

from __future__ import annotations

import traceback
from pathlib import Path
from typing import List, Optional

from .cli_execute import execute_command
from .cli_gather import gather_user_requirements
from .errors import ExtractionError
from .logging_utils import LOG, setup_logging


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Phase 1: Gather user requirements (parse args)
    Phase 2: Execute the command
    """
    try:
        config = gather_user_requirements(argv)
    except ValueError as e:
        setup_logging(False)
        LOG.error(str(e))
        return 1

    # Setup logging (side effect necessary for all phases)
    if config.log_file:
        Path(config.log_file).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)
    setup_logging(config.debug, log_file=config.log_file, verbosity=config.verbosity)

    try:
        return execute_command(config)
    except ExtractionError as e:
        LOG.error("%s %s", e.message, e.advice)
        return 1
    except Exception as e:
        LOG.error(str(e))
        if config.debug:
            LOG.error(traceback.format_exc())
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
