"""
Pollen App - Leiden Pollen Levels Report

Responsibilities:
- Fetch the AccuWeather health-activities page once (browser-like headers, 15s timeout)
- Decode gzip bodies; pass other encodings through
- Extract pollen, mold and dust categories from the card markup
- Print a colorized terminal report

Modules:
- fetcher: HTTP retrieval and body decoding
- parser: card extraction and relevance filtering
- report: rich rendering of header, records, errors
- cli: pipeline wiring and exit codes
"""
