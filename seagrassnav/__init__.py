"""
seagrassnav - Coverage planning and live-mission simulation for seagrass
restoration robots.
"""

__version__ = "0.1.0"
