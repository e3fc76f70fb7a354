"""Dependências de autorização compartilhadas pelos routers"""
from fastapi import Depends
from league_api.core.config import settings
from league_api.core.security import get_current_user, require_roles

authenticated = [Depends(get_current_user)]
admin_only = [Depends(require_roles(*settings.admin_roles_list))]
