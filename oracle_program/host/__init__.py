"""
Host capabilities

Process channel and fetch transport injected into the execution phase.
"""

from oracle_program.host.base import Fetcher, Process
from oracle_program.host.http import ProxyHttpFetcher
from oracle_program.host.process import InMemoryProcess

__all__ = ["Fetcher", "Process", "ProxyHttpFetcher", "InMemoryProcess"]
