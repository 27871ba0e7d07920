"""
Synchronous signal/listener primitive.
"""

# © Stuart Longland VK4MSL
# SPDX-License-Identifier: GPL-2.0-or-later

from .observer import InvalidArgument, Listener, Signal

__all__ = ["InvalidArgument", "Listener", "Signal"]
