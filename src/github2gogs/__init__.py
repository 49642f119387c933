"""github2gogs

Mirror the public GitHub repositories of a user to a Gogs instance through
the Gogs migration API.
"""

__version__ = '0.1.0'
__build_time__ = 'unknown'

from .cli import main

__all__ = ['main']
