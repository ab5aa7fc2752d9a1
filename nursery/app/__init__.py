"""Application composition layer.

Wires adapters and use cases into runnable workflows; holds no business
logic of its own.
"""
