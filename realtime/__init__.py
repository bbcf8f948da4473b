"""
Realtime app: a change feed that tells connected dashboards which portal
tables changed so they can refetch.
"""
