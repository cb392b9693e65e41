# vidarscan

A small command-line scanner for networks you are authorised to test. It has
three modes:

- **dir** – requests every path from a wordlist against a base URL and reports
  the ones that answer with a 2xx status. Requests are paced by an adaptive
  rate limiter that speeds up while the target answers quickly and cleanly,
  and slows down when errors and latency climb.
- **host** – walks every address of an IPv4 CIDR block and reports hosts that
  answer (or actively refuse) a TCP connection on port 80, 443 or 8080.
- **port** – tries a TCP connection to each port in a range on one target and
  reports the open ones.

Every probe is retried up to three times before it is counted as a failure.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Usage

Path scan — each non-empty line of the wordlist is appended to the URL as is,
so the URL should end with a slash:

```
vidarscan dir -u "http://example.com/" -d wordlist.txt
```

Host discovery over an IPv4 CIDR block:

```
vidarscan host -i 192.168.1.0/24
```

Port scan; the range defaults to `0-65535`, and a single port such as `-p 22`
is accepted too:

```
vidarscan port -u 192.168.1.10 -p 1-1024
```

Findings are printed as they arrive:

```
[Alive] 192.168.1.10
[OPEN] 22
[found] 200    http://example.com/admin
```

An invalid CIDR block or port range is reported and the command exits with
status 1. Run `vidarscan --help` or `vidarscan <mode> --help` for all options.

## Library use

The building blocks can be used directly:

```python
from vidarscan.parseargs import parse_port, parse_cidr
from vidarscan.portscan import port_scan
from vidarscan.hostscan import host_scan
from vidarscan.dirscan import dir_scan

start, end = parse_port("20-25")               # (20, 25)
open_ports = port_scan("192.168.1.10", start, end)   # sorted list of ints

first, last = parse_cidr("10.0.0.0/30")        # ("10.0.0.0", "10.0.0.3")
alive = host_scan(first, last)                 # ascending list of addresses

found = dir_scan("http://example.com/", "wordlist.txt")  # URLs in wordlist order
```

`parse_port` and `parse_cidr` raise `ValueError` on invalid input.

`dir_scan` and `vidarscan.request.send_message` take an optional
`classifier`: a callable given the visible text of the first 4096 bytes of a
2xx response (script and style contents removed). When it returns
`"__label__404"` the page is treated as a soft not-found page and not reported;
if it raises, the page is not reported either.

Other helpers: `vidarscan.retry` (`retry_until_true`, `retry_call`),
`vidarscan.tcp` (`tcp_connect`, `is_alive_tcp`), `vidarscan.adaptive`
(`RateLimiter`, `AdaptiveLimiter`), `vidarscan.htmltext.html_to_text` and
`vidarscan.wordlist` (`load_lines`, `build_urls`).

## What it does not do

- No soft-404 classifier is included. The `dir` command passes none, so it
  reports every 2xx response; filtering out custom not-found pages needs a
  classifier supplied through `dir_scan`.
- Host discovery and CIDR parsing handle IPv4 only.
- Results are printed to standard output only; nothing is saved to a file.