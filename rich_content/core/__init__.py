"""Core model and content-sequence engine.

WHY: The core package holds the stable heart of the library: the IR
dataclasses and the engine that merges, converts and serializes them.

HOW: model.py defines the data structures, children.py implements the
public operations on sequences of them.

RULES:
- Model dataclasses are the contract; change with care
- The engine never inspects InlineNode internals
"""
