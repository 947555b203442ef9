"""
Interactive first-run setup.

Asks for the Spotify app credentials, runs the authorization code flow
with a short-lived local HTTP callback server and writes a fresh
configuration holding the refresh token.
"""

import getpass
import logging
import queue
import threading
import webbrowser
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Callable, Optional, Tuple
from urllib.parse import parse_qs, urlparse

from spotmenu.core.auth import SCOPES, AuthClient
from spotmenu.core.config import Config, ConfigManager, SpotifyCredentials
from spotmenu.core.errors import AuthError, SetupCancelled

logger = logging.getLogger("Setup")

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8080

WELCOME = """Welcome to spotmenu setup!
WARNING: If you already have configured spotmenu, this will overwrite your current configuration.

1) Visit https://developer.spotify.com/dashboard/applications and click on "Create an app".
2) Enter a name and description.
3) Click on "Edit Settings" and add '{redirect_uri}' to the "Redirect URIs"
   by clicking on "Add" and save the settings with "Save".
4) Enter the app details in the following steps.
"""

BROWSER_HINT = (
    "\nPlease follow the steps in your web browser and log in using your "
    "Spotify account. If the URL did not open automatically, please manually "
    "open the following URL:"
)

CALLBACK_RESPONSE = (
    "The setup process is complete! You may now close this window "
    "and use spotmenu to control spotify."
)

CALLBACK_DENIED = (
    "The login failed ({error}). Close this window and run "
    "'spotmenu setup' again."
)


def _callback_handler(results: "queue.Queue"):
    class CallbackHandler(BaseHTTPRequestHandler):
        def do_GET(self):
            query = parse_qs(urlparse(self.path).query)
            code = (query.get("code") or [""])[0]
            error = (query.get("error") or [""])[0]

            if code:
                self._reply(200, CALLBACK_RESPONSE)
                results.put(code)
            elif error:
                self._reply(400, CALLBACK_DENIED.format(error=error))
                results.put(AuthError(f"Authorization failed: {error}"))
            else:
                # favicon and other stray requests
                logger.debug(f"Ignoring callback request: {self.path}")
                self._reply(404, "")

        def _reply(self, status: int, body: str):
            self.send_response(status)
            self.send_header("Content-Type", "text/plain; charset=utf-8")
            self.end_headers()
            self.wfile.write(body.encode("utf-8"))

        def log_message(self, format, *args):
            logger.debug("callback: " + format % args)

    return CallbackHandler


class CallbackServer:
    """Local HTTP listener receiving the OAuth redirect."""

    def __init__(self, host: str, port: int):
        self.results: "queue.Queue" = queue.Queue()
        self.httpd = HTTPServer((host, port), _callback_handler(self.results))
        self._thread = threading.Thread(target=self.httpd.serve_forever, daemon=True)

    def start(self):
        self._thread.start()
        logger.info(f"Callback server listening on {self.httpd.server_address}")

    def wait_for_code(self, timeout: Optional[float] = None) -> str:
        """Block until the redirect arrives; raise `AuthError` if the login was refused."""
        result = self.results.get(timeout=timeout)
        if isinstance(result, AuthError):
            raise result
        return result

    def stop(self):
        self.httpd.shutdown()
        self.httpd.server_close()
        self._thread.join(timeout=5)


def ask_credentials(
    ask: Callable[[str], str] = input,
    ask_secret: Callable[[str], str] = getpass.getpass,
) -> Tuple[str, str]:
    """Prompt until both the client id and the client secret are non-empty."""
    client_id = ""
    while not client_id:
        client_id = ask("Enter the Client ID: ").strip()

    client_secret = ""
    while not client_secret:
        client_secret = ask_secret(
            "Click on 'Show Client Secret' and enter the Client Secret: "
        ).strip()

    return client_id, client_secret


def authenticate(auth: AuthClient, server: CallbackServer, open_browser=webbrowser.open) -> str:
    """Run the browser login and return the refresh token."""
    server.start()
    try:
        url = auth.build_auth_url()
        try:
            open_browser(url)
        except webbrowser.Error as e:
            logger.warning(f"Could not open browser: {e}")

        print(BROWSER_HINT)
        print(url)

        code = server.wait_for_code()
    finally:
        server.stop()

    tokens = auth.get_token_pair(code)
    refresh_token = tokens.get("refresh_token")
    if not refresh_token:
        raise AuthError("Token response missing refresh_token")
    return refresh_token


def run_setup(
    config_manager: ConfigManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Config:
    """Run the whole setup and save the resulting configuration."""
    redirect_uri = f"http://{host}:{port}"
    print(WELCOME.format(redirect_uri=redirect_uri))

    try:
        client_id, client_secret = ask_credentials()
    except (KeyboardInterrupt, EOFError) as e:
        raise SetupCancelled() from e

    auth = AuthClient(client_id, client_secret, redirect_uri, SCOPES)
    server = CallbackServer(host, port)
    try:
        refresh_token = authenticate(auth, server)
    except KeyboardInterrupt as e:
        raise SetupCancelled() from e

    config = Config(
        spotify=SpotifyCredentials(
            client_id=client_id,
            client_secret=client_secret,
            refresh_token=refresh_token,
        )
    )
    config_manager.save(config)
    logger.info("Setup finished")
    print("\nSetup finished. You can now use spotmenu to control spotify.")
    return config
