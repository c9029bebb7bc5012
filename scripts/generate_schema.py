#!/usr/bin/env python
# ============================================================================
# SCHEMA GENERATION SCRIPT
# ============================================================================
# PURPOSE: Render a YAML schema file without installing the package
# USAGE:
#   python scripts/generate_schema.py schemas/airports.yaml
#   python scripts/generate_schema.py schemas/airports.yaml --typescript
#   python scripts/generate_schema.py schemas/airports.yaml --drop
# ============================================================================

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pgschema.cli import main


if __name__ == "__main__":
    sys.exit(main())
