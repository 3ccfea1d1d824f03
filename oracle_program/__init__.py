"""
Price feed oracle program.

Fetches an asset price through the data proxy and reports it to the host
as a fixed-point integer.
"""
