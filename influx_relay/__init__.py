# Copyright 2025 Loopper-AI
# Lambda-InfluxRelay: sensor line protocol → InfluxDB write API
