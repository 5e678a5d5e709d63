"""
Basic options: construction, matching, and exception capture.

Run: python examples/basic_options.py
"""
import json

from optionpy import (
    some_when,
    to_option,
    some_or_exception,
    some_not_null_or_exception,
    flatten,
    match,
    use_config,
)


def parse_port(raw: str):
    # ValueError becomes the cause; anything else still raises
    return some_or_exception(lambda: int(raw), ValueError).filter(
        lambda p: 0 < p < 65536, ValueError(f"port out of range: {raw}")
    )


def main():
    print(some_when(5, lambda x: x > 3).match(lambda x: x * 2, lambda: -1))
    print(to_option(None).match(lambda x: x, lambda: 0))

    for raw in ["8080", "http", "70000"]:
        print(raw, parse_port(raw).match(lambda p: f"ok {p}", lambda e: f"error {e}"))

    settings = {"name": "svc", "owner": None}
    for key in ["name", "owner", "port"]:
        found = some_not_null_or_exception(lambda: settings[key], KeyError)
        print(key, match(found, lambda v: v, lambda e: f"missing key {e}", lambda: "unset"))

    nested = to_option(json.loads('{"a": {"b": 1}}').get("a")).map(lambda a: to_option(a.get("b")))
    print(flatten(nested))

    # Captured exceptions are logged at DEBUG
    with use_config(log_level="DEBUG"):
        some_or_exception(lambda: 1 / 0)


if __name__ == "__main__":
    main()
