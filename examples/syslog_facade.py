"""Minimal example sending messages through the pyslog facade."""

from __future__ import annotations

import logging

import pyslog


def main() -> None:
    # Before configure, messages land on the console fallback logger.
    pyslog.info("starting up")

    try:
        pyslog.configure(facility="local3", tag="pyslog-example")
    except pyslog.SyslogConnectError as exc:
        pyslog.warningf("local syslog unavailable: %s", exc)

    pyslog.noticef("processed %d records in %.1fs", 1200, 3.4)
    pyslog.err("lookup failed for ", "user-42")

    logging.getLogger().addHandler(pyslog.SyslogBridgeHandler())
    logging.getLogger("example.worker").warning("stdlib records are forwarded too")


if __name__ == "__main__":
    main()
