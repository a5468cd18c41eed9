from __future__ import annotations

import argparse
import json
from dataclasses import dataclass
from urllib import request
from urllib.error import HTTPError, URLError

ENDPOINTS = ("/", "/health", "/api/info")


@dataclass
class EndpointResult:
    """Outcome of a single GET against the running service."""

    path: str
    status: int | None
    body: object
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == 200


def get_json(url: str) -> tuple[int, object]:
    req = request.Request(url=url, headers={"Accept": "application/json"}, method="GET")
    with request.urlopen(req, timeout=10) as resp:
        return resp.status, json.loads(resp.read().decode("utf-8"))


def check_endpoint(api_base: str, path: str) -> EndpointResult:
    try:
        status, body = get_json(f"{api_base.rstrip('/')}{path}")
    except HTTPError as error:
        return EndpointResult(path=path, status=error.code, body=None, error=str(error))
    except (URLError, OSError, ValueError) as error:
        return EndpointResult(path=path, status=None, body=None, error=str(error))
    return EndpointResult(path=path, status=status, body=body)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--api-base", default="http://127.0.0.1:8001")
    args = parser.parse_args(argv)

    failed = 0
    for path in ENDPOINTS:
        result = check_endpoint(args.api_base, path)
        if result.ok:
            print(f"[OK] GET {path} -> {json.dumps(result.body)}")
        else:
            failed += 1
            print(f"[FAIL] GET {path} -> status={result.status} error={result.error}")

    print(f"[DONE] {len(ENDPOINTS) - failed}/{len(ENDPOINTS)} endpoints healthy")
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
