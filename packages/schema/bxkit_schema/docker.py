"""
Docker CLI Configuration Models

Models for the subset of `~/.docker/config.json` bxkit reads. Unknown keys
are kept (extra="allow") because the Docker CLI adds new ones regularly.

Keys use the camelCase spelling of the config file as aliases; dump with
`model_dump(by_alias=True, exclude_none=True)` to get the original layout back.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class AuthConfig(BaseModel):
    """Credentials for one registry."""

    username: Optional[str] = None
    password: Optional[str] = None
    auth: Optional[str] = None
    email: Optional[str] = None
    server_address: Optional[str] = Field(default=None, alias="serveraddress")
    identity_token: Optional[str] = Field(default=None, alias="identitytoken")
    registry_token: Optional[str] = Field(default=None, alias="registrytoken")

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ProxyConfig(BaseModel):
    """Proxy settings injected into containers and builds."""

    http_proxy: Optional[str] = Field(default=None, alias="httpProxy")
    https_proxy: Optional[str] = Field(default=None, alias="httpsProxy")
    no_proxy: Optional[str] = Field(default=None, alias="noProxy")
    ftp_proxy: Optional[str] = Field(default=None, alias="ftpProxy")
    all_proxy: Optional[str] = Field(default=None, alias="allProxy")

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ConfigFile(BaseModel):
    """Docker CLI config file."""

    auths: Optional[Dict[str, AuthConfig]] = None
    creds_store: Optional[str] = Field(default=None, alias="credsStore")
    cred_helpers: Optional[Dict[str, str]] = Field(default=None, alias="credHelpers")
    proxies: Optional[Dict[str, ProxyConfig]] = None
    current_context: Optional[str] = Field(default=None, alias="currentContext")
    experimental: Optional[str] = None
    plugins: Optional[Dict[str, Dict[str, Any]]] = None
    aliases: Optional[Dict[str, str]] = None

    model_config = ConfigDict(extra="allow", populate_by_name=True)
