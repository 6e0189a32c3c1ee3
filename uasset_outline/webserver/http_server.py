"""
UAsset Outline HTTP Server

Accepts raw package bytes and returns their outline as JSON.

Routes:
  GET  /api/status   service name, version and active configuration
  POST /api/outline  body = package file; optional ?name= for reporting
"""

import asyncio
import logging
from typing import Optional

from aiohttp import web

from uasset_outline import __version__
from uasset_outline.config import OutlineConfig, config_to_dict, load_config
from uasset_outline.errors import ParseError
from uasset_outline.outline import UAssetOutlineParser


class OutlineServer:
    """HTTP server for the outline API."""

    def __init__(
        self,
        config: Optional[OutlineConfig] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.config = config or OutlineConfig()
        self.host = self.config.server.host
        self.port = self.config.server.port
        self.logger = logger
        self.parser = UAssetOutlineParser(self.config.decoder, logger)

        # aiohttp components
        self.app: Optional[web.Application] = None
        self.runner: Optional[web.AppRunner] = None
        self.site: Optional[web.TCPSite] = None

    def log(self, level: str, message: str):
        """Log a message if logger is available."""
        if self.logger:
            getattr(self.logger, level)(message)

    def create_app(self) -> web.Application:
        """Build the aiohttp application with all routes."""
        app = web.Application(client_max_size=self.config.server.max_upload_bytes)

        @web.middleware
        async def debug_middleware(request, handler):
            self.log('debug', f'Request: {request.method} {request.path}')
            try:
                response = await handler(request)
                self.log('debug', f'Response: {response.status} for {request.path}')
                return response
            except web.HTTPException as e:
                self.log('debug', f'HTTP Exception: {e.status} for {request.path}')
                raise

        app.middlewares.append(debug_middleware)

        app.router.add_get('/api/status', self._handle_status)
        app.router.add_post('/api/outline', self._handle_outline)
        return app

    async def start(self):
        """Start the HTTP server."""
        self.app = self.create_app()
        self.runner = web.AppRunner(self.app)
        await self.runner.setup()

        self.site = web.TCPSite(self.runner, self.host, self.port)
        await self.site.start()

        self.log('info', f'HTTP server listening on {self.host}:{self.port}')

    async def stop(self):
        """Stop the HTTP server gracefully."""
        self.log('info', 'Stopping HTTP server...')

        if self.site:
            await self.site.stop()

        if self.runner:
            await self.runner.cleanup()

        self.log('info', 'HTTP server stopped')

    async def _handle_status(self, request: web.Request) -> web.Response:
        """Handle status API endpoint."""
        return web.json_response({
            'service': 'uasset_outline',
            'version': __version__,
            'config': config_to_dict(self.config),
        })

    async def _handle_outline(self, request: web.Request) -> web.Response:
        """Outline the package sent as the request body."""
        name = request.query.get('name', 'upload')
        try:
            data = await request.read()
        except web.HTTPRequestEntityTooLarge:
            self.log('warning', f'Rejected oversized upload {name}')
            return web.json_response(
                {'error': 'PayloadTooLarge',
                 'message': f'Upload exceeds {self.config.server.max_upload_bytes} bytes'},
                status=413)

        if not data:
            return web.json_response(
                {'error': 'MalformedInput', 'message': 'Empty request body'}, status=400)

        loop = asyncio.get_running_loop()
        try:
            # Decoding is CPU bound
            outline = await loop.run_in_executor(None, self.parser.load_bytes, data, name)
        except ParseError as e:
            self.log('warning', f'Failed to outline {name}: {e}')
            return web.json_response({'error': e.kind, 'message': str(e)}, status=400)

        return web.json_response(outline.to_dict())


async def _serve(server: OutlineServer):
    await server.start()
    try:
        await asyncio.Event().wait()
    finally:
        await server.stop()


def main(config_path: Optional[str] = None):
    """Main entry point for the outline HTTP server."""
    config = load_config(config_path)
    logging.basicConfig(level=getattr(logging, config.logging.level, logging.INFO),
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    server = OutlineServer(config, logging.getLogger('uasset_outline.webserver'))

    try:
        asyncio.run(_serve(server))
    except KeyboardInterrupt:
        pass


if __name__ == '__main__':
    main()
