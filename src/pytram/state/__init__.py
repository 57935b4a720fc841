"""Transition engine.

This package is the single place that decides whether an event may be
applied to a tram state and what the resulting state is. It holds no
state of its own; controllers own the state and serialize access to it.
"""
