# src/fatcp/api/deps.py
from typing import Annotated

from fastapi import Depends

from fatcp.core.config import Settings, get_settings

SettingsDep = Annotated[Settings, Depends(get_settings)]
