"""
whoiswatch — watch a zone's whois record and mail a report when it changes.
"""

__app_name__ = "Whois Watch"
__version__ = "1.0.0"
