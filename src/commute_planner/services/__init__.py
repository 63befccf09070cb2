"""
Shared plumbing used by the backends and the travel service.

- http.py        - requests session with timeout, User-Agent and retry adapter
- concurrency.py - order-preserving asyncio fan-out (gather_ordered)
"""
