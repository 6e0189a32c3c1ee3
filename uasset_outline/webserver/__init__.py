"""
UAsset Outline Web Server Package

Provides an HTTP endpoint that outlines uploaded package files.
"""

from uasset_outline.webserver.http_server import OutlineServer, main

__all__ = ['OutlineServer', 'main']
