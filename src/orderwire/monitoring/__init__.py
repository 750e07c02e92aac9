"""
Monitoring and metrics.
"""
