# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Feeder -> work queue -> dispatcher -> probers."""

from .barrier import CompletionBarrier
from .dispatcher import Dispatcher
from .feeder import Feeder
from .prober import Prober
from .workqueue import WorkQueue

__all__ = [
    "CompletionBarrier",
    "Dispatcher",
    "Feeder",
    "Prober",
    "WorkQueue",
]
