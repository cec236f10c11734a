"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to where the network data lives:
- CSV files on disk
- In-memory records
"""
