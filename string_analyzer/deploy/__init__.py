"""
Remote deployment tooling.
Ships a checkout of this repository to a host over SSH, runs it in Docker, and fronts it with Nginx.
"""
