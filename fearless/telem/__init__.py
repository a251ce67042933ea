"""Telemetry pipeline: UDP ingest, value filters and summarising reporters."""