"""
Prefect flows.

Flows:
- travel: Compute travel times from a listing set to the user's destinations

Usage (local):
    python -m commute_planner.flows.travel

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'compute-travel-times/default'
"""
