"""Runnable models of computer-systems concepts: data representation, machine-level code, a heap allocator, robust I/O, sockets, timing and a small shell."""

__version__ = "0.1.0"