# This file renders the Nginx site configurations used by the deployment.

from __future__ import annotations

PROXY_SITE_TEMPLATE = """server {{
    listen 80;
    server_name {server_name};
    location / {{
        proxy_pass http://localhost:{app_port};
        proxy_set_header Host $host;
        proxy_set_header X-Real-IP $remote_addr;
        proxy_set_header X-Forwarded-For $proxy_add_x_forwarded_for;
        proxy_set_header X-Forwarded-Proto $scheme;
    }}
}}
"""

# Installed by cleanup instead of deleting the package-managed default site.
NOT_FOUND_SITE = """server {
    listen 80;
    server_name _;
    return 404;
}
"""


def render_proxy_site(*, server_name: str, app_port: int) -> str:
    """Reverse proxy all traffic for `server_name` to the app on `app_port`."""

    return PROXY_SITE_TEMPLATE.format(server_name=server_name, app_port=app_port)
