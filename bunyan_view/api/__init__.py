"""
HTTP API for bunyan-view.
"""
