from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parents[3]

# Hourly rotated log files land here while DEBUG is on
LOG_DIR = PROJECT_ROOT / 'logs'
