#!/usr/bin/env python3
"""
Lighthouse Badges

Run this script to render badges for the Lighthouse reports in a directory
and upload them to S3 or Azure Blob Storage.

Usage:
    python run.py -c performance,accessibility        # Badges for ./*.report.json
    python run.py -r ./lighthouse -c performance      # Custom reports directory
    python run.py -c performance -d none              # Render only, no upload
    python run.py -c performance --upload-reports     # Also upload raw reports
    python run.py --github-actions                    # GitHub Actions mode
"""

import sys
from lighthouse_badges.cli import main

if __name__ == "__main__":
    sys.exit(main())
