"""
Tests for the outline HTTP server

Runs the aiohttp application in-process through aiohttp's test client.
"""

import asyncio
import threading
import pytest
import sys
import os

from aiohttp import test_utils

# Add the parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from uasset_outline import __version__
from uasset_outline.config import OutlineConfig
from uasset_outline.webserver import OutlineServer

from package_builder import ExportSpec, ImportSpec, PackageBuilder


def run_async(coro):
    """Helper to run async functions in tests."""
    return asyncio.run(coro)


async def _request(server: OutlineServer, method: str, path: str, **kwargs):
    async with test_utils.TestClient(test_utils.TestServer(server.create_app())) as client:
        resp = await client.request(method, path, **kwargs)
        return resp.status, await resp.json()


def _package() -> bytes:
    b = PackageBuilder(
        imports=[ImportSpec(class_package='/Script/CoreUObject', class_name='Class',
                            object_name='Actor')],
        exports=[ExportSpec(class_index=-1, object_name='MyActor')],
    )
    return b.build()


class TestStatus:
    """Test the status endpoint."""

    def test_status(self):
        status, body = run_async(_request(OutlineServer(), 'GET', '/api/status'))
        assert status == 200
        assert body['service'] == 'uasset_outline'
        assert body['version'] == __version__
        assert body['config']['decoder']['strict_booleans'] is True


class TestOutlineEndpoint:
    """Test POST /api/outline."""

    def test_outline(self):
        status, body = run_async(_request(
            OutlineServer(), 'POST', '/api/outline?name=MyActor.uasset', data=_package()))
        assert status == 200
        assert body['file'] == 'MyActor.uasset'
        assert body['exports'] == [{'index': 1, 'name': 'MyActor', 'class': 'Actor'}]
        assert body['imports'] == [{'index': 1, 'name': 'Actor', 'class': 'Class'}]

    def test_malformed_package(self):
        status, body = run_async(_request(
            OutlineServer(), 'POST', '/api/outline', data=b'\x00' * 32))
        assert status == 400
        assert body['error'] == 'MalformedInput'

    def test_truncated_package(self):
        status, body = run_async(_request(
            OutlineServer(), 'POST', '/api/outline', data=_package()[:30]))
        assert status == 400
        assert body['error'] == 'UnexpectedEndOfBuffer'

    def test_empty_body(self):
        status, body = run_async(_request(OutlineServer(), 'POST', '/api/outline', data=b''))
        assert status == 400
        assert body['error'] == 'MalformedInput'

    def test_oversized_upload(self):
        config = OutlineConfig()
        config.server.max_upload_bytes = 100
        status, body = run_async(_request(
            OutlineServer(config), 'POST', '/api/outline', data=_package()))
        assert status == 413
        assert body['error'] == 'PayloadTooLarge'


    def test_decoding_runs_off_the_event_loop(self):
        """Packages are decoded in a worker thread, not on the loop's thread."""
        server = OutlineServer()
        threads = []
        load_bytes = server.parser.load_bytes

        def recording_load_bytes(data, name):
            threads.append(threading.get_ident())
            return load_bytes(data, name)

        server.parser.load_bytes = recording_load_bytes

        async def post():
            status, _ = await _request(server, 'POST', '/api/outline', data=_package())
            return status, threading.get_ident()

        status, loop_thread = run_async(post())
        assert status == 200
        assert len(threads) == 1
        assert threads[0] != loop_thread


class TestLifecycle:
    """Test starting and stopping the server."""

    def test_start_stop(self):
        config = OutlineConfig()
        config.server.host = '127.0.0.1'
        config.server.port = 0
        server = OutlineServer(config)

        async def cycle():
            await server.start()
            assert server.runner is not None
            await server.stop()

        run_async(cycle())
