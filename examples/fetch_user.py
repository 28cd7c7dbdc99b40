"""Fetch the logged-in user's record using credentials from the environment."""

from __future__ import annotations

import json
import os

from unofficial_nest import NestClient, NestError, NestSession

TRANSPORT_URL = os.getenv("NEST_TRANSPORT_URL", "https://frontdoor.nest.com")
USER_ID = os.getenv("NEST_USER_ID", "")
ACCESS_TOKEN = os.getenv("NEST_ACCESS_TOKEN", "")


def log_section(title: str) -> None:
    print("\n" + "=" * 80)
    print(title)
    print("=" * 80)


def main() -> None:
    session = NestSession(transport_url=TRANSPORT_URL, user_id=USER_ID, access_token=ACCESS_TOKEN)
    with NestClient(session, log_level="debug") as client:
        log_section("Request preview")
        request = client.builder.build_get("", f"/v2/mobile/user.{USER_ID}", authenticated=True)
        print(request.method, request.url)
        for name in ("User-Agent", "X-nl-user-id", "X-nl-protocol-version", "Accept-Language"):
            print(f"{name}: {request.headers[name]}")

        log_section("Response")
        try:
            data = client.execute(request)
        except NestError as exc:
            print(f"Request failed: {exc}")
            return
        print(json.dumps(data, indent=2, sort_keys=True))


if __name__ == "__main__":
    main()
