"""recordkit configuration.

- `RecordkitConfigModel`: Engine settings
- `load_config()`: Load settings from YAML and environment variables
"""

from .loader import load_config
from .models import RecordkitConfigModel

__all__ = ["RecordkitConfigModel", "load_config"]
