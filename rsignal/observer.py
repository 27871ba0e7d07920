#!/usr/bin/env python3

"""
A very simple signal/listener implementation.

Listeners are called synchronously, most recently registered first.  A
listener may be bound to a *context*, which is handed to the callback as
its receiver (the first positional argument) in the same way a bound
method receives ``self``.
"""

# © Stuart Longland VK4MSL
# SPDX-License-Identifier: GPL-2.0-or-later

import logging


class InvalidArgument(TypeError):
    """
    Raised when something that cannot be called is offered as a callback.
    """

    pass


class Listener(object):
    """
    A single subscription on a ``Signal``.  The callback, context and
    one-shot flag are fixed once created.
    """

    def __init__(self, callback, context=None, once=False):
        self._callback = callback
        self._context = context
        self._once = bool(once)
        self._detached = False

    @property
    def callback(self):
        return self._callback

    @property
    def context(self):
        return self._context

    @property
    def once(self):
        return self._once

    @property
    def detached(self):
        """
        Return true once this listener has been removed from its signal.
        """
        return self._detached

    def _detach(self):
        self._detached = True

    def matches(self, callback, context=None):
        """
        Return true if this listener calls ``callback``.  If ``context`` is
        given (anything truthy), the context must be the same object too.
        """
        if self._callback is not callback:
            return False

        if not context:
            return True

        return self._context is context

    def matches_context(self, context):
        """
        Return true if this listener is bound to ``context``.
        """
        return self._context is context

    def invoke(self, args, kwargs=None):
        if kwargs is None:
            kwargs = {}

        if self._context is None:
            self._callback(*args, **kwargs)
        else:
            self._callback(self._context, *args, **kwargs)

    def __call__(self, *args, **kwargs):
        self.invoke(args, kwargs)

    def __eq__(self, other):
        if other is self:
            return True

        if isinstance(other, Listener):
            return (
                self._callback is other.callback
                and self._context is other.context
            )
        else:
            return self._callback is other

    def __hash__(self):
        return id(self._callback)

    def __repr__(self):
        return "%s(%r, context=%r, once=%r)" % (
            self.__class__.__name__,
            self._callback,
            self._context,
            self._once,
        )


class Signal(object):
    def __init__(self, disabled=False, log=None):
        if log is None:
            log = logging.getLogger(self.__class__.__module__)

        self._log = log
        self._listeners = []
        self._disabled = bool(disabled)

    @property
    def disabled(self):
        """
        Return true if triggering this signal currently does nothing.
        """
        return self._disabled

    @property
    def listeners(self):
        """
        Return a snapshot of the registered listeners, oldest first.
        """
        return tuple(self._listeners)

    def __len__(self):
        return len(self._listeners)

    def __bool__(self):
        # An empty signal is still a signal.
        return True

    def __contains__(self, callback):
        return self._find(callback) is not None

    def on(self, callback, context=None):
        """
        Register ``callback`` to be called each time the signal is
        triggered.  Registering the same callback (and context) again does
        nothing.
        """
        self._add(callback, context, False)

    def once(self, callback, context=None):
        """
        Register ``callback`` to be called the next time the signal is
        triggered, after which it is removed.
        """
        self._add(callback, context, True)

    def off(self, callback=None, context=None):
        """
        Remove listeners.

        - no arguments: remove everything (see ``clear``)
        - ``context`` only: remove every listener bound to ``context``
        - ``callback`` (and optionally ``context``): remove the most
          recently added matching listener
        """
        if not callback and not context:
            self.clear()
            return

        for index in range(len(self._listeners) - 1, -1, -1):
            listener = self._listeners[index]

            if not callback:
                if not listener.matches_context(context):
                    continue
            elif not listener.matches(callback, context):
                continue

            self._log.debug("Removing %r", listener)
            del self._listeners[index]
            listener._detach()

            if callback:
                # Only one listener can match a given callback
                return

    def trigger(self, *args, **kwargs):
        """
        Call every registered listener with the given arguments, most
        recently registered first.  Exceptions raised by a listener are
        passed straight back to the caller, skipping the remaining
        listeners.
        """
        if self._disabled:
            self._log.debug("Signal disabled, ignoring trigger")
            return

        # Listeners may rearrange the list while we walk it, so walk a copy
        # and skip anything that has since been removed.
        for listener in reversed(list(self._listeners)):
            if listener.detached:
                continue

            self._emit(listener, args, kwargs)

            if listener.once:
                self._discard(listener)

    def clear(self):
        """
        Remove all listeners.
        """
        if self._listeners:
            self._log.debug("Clearing %d listeners", len(self._listeners))

        for listener in self._listeners:
            listener._detach()

        self._listeners = []

    def disable(self, value=True):
        """
        Disable (or with ``value=False``, re-enable) calling of listeners
        when the signal is triggered.
        """
        value = bool(value)
        if value != self._disabled:
            self._log.debug("%s signal", "Disabling" if value else "Enabling")

        self._disabled = value

    def _add(self, callback, context, once):
        if not callable(callback):
            raise InvalidArgument(
                "callback must be callable, got %r" % (callback,)
            )

        if self._find(callback, context) is not None:
            return

        listener = Listener(callback, context, once)
        self._log.debug("Adding %r", listener)
        self._listeners.append(listener)

    def _find(self, callback, context=None):
        for listener in self._listeners:
            if listener.matches(callback, context):
                return listener

        return None

    def _discard(self, listener):
        # Remove this exact record if a listener hasn't already done so.
        if listener.detached:
            return

        for index in range(len(self._listeners) - 1, -1, -1):
            if self._listeners[index] is listener:
                del self._listeners[index]
                break

        listener._detach()

    def _emit(self, listener, args, kwargs):
        listener.invoke(args, kwargs)
