"""Send a synthetic wellness payload to a running instance of the API.

Usage:
    python scripts/analyze_sample.py [BASE_URL]

BASE_URL defaults to http://localhost:8000. The payload is synthetic; never
paste real user data into this script.
"""

from __future__ import annotations

import sys

import httpx

SAMPLE_PAYLOAD = {
    "moodHistory": "Mon: happy\nTue: anxious\nWed: calm\nThu: tired\nFri: happy",
    "sleepHistory": "Mon: 7h\nTue: 5h\nWed: 8h\nThu: 5.5h\nFri: 7.5h",
    "habits": "Exercise: Mon, Wed, Fri\nCoffee after 3pm: Tue, Thu\nMeditation: Wed",
    "observations": "Tue: deadline at work.\nThu: skipped lunch, headache in the afternoon.",
}


def main() -> None:
    base_url = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:8000"
    resp = httpx.post(f"{base_url.rstrip('/')}/analyzeMood", json=SAMPLE_PAYLOAD, timeout=60.0)
    print(f"HTTP {resp.status_code} (X-Request-ID: {resp.headers.get('X-Request-ID')})")
    body = resp.json()
    print(body.get("result") or body.get("detail"))


if __name__ == "__main__":
    main()
