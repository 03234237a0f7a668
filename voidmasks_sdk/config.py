"""
Network configuration for the VOIDMASKS SDK.

Presets live in the packaged ``networks.json`` and are loaded once. Settings
are immutable values handed to whatever layer performs the contract calls;
the generator and the decoder never read them.
"""
import importlib.resources
import json
import logging
import os
import threading
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import NetworkConfigError

logger = logging.getLogger(__name__)


class NetworkSettings(BaseModel):
    """One network preset"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    network: str
    contract_address: str = Field(..., alias="contractAddress")
    contract_name: Optional[str] = Field(None, alias="contractName")
    stacks_api: str = Field(..., alias="stacksApi")
    mint_fee: int = Field(0, alias="mintFee")

    @property
    def contract(self) -> Tuple[str, str]:
        """
        Contract as ``(address, name)``.

        ``contract_address`` may be a bare deployer address or the
        ``ADDRESS.NAME`` form, in which case the embedded name wins.
        """
        if "." in self.contract_address:
            address, name = self.contract_address.split(".", 1)
            return address, name
        if not self.contract_name:
            raise NetworkConfigError(f"No contract name configured for {self.network}")
        return self.contract_address, self.contract_name


class NetworkConfig:
    """Access to the packaged network presets"""

    _networks_cache: Optional[Dict[str, Dict[str, Any]]] = None
    _lock = threading.RLock()

    @classmethod
    def load_networks(cls) -> Dict[str, Dict[str, Any]]:
        """
        Load all network presets.

        Returns:
            Mapping of network name to raw preset
        """
        with cls._lock:
            if cls._networks_cache is None:
                resource = importlib.resources.files("voidmasks_sdk").joinpath("networks.json")
                with resource.open("r", encoding="utf-8") as f:
                    cls._networks_cache = json.load(f)
                logger.debug(f"Loaded network presets: {', '.join(cls._networks_cache)}")
            return cls._networks_cache

    @classmethod
    def get_network(cls, name: str) -> Dict[str, Any]:
        """
        Get the raw preset for a network.

        Raises:
            NetworkConfigError: If the network is unknown
        """
        networks = cls.load_networks()
        if name not in networks:
            raise NetworkConfigError(
                f"Unknown network '{name}'. Available networks: {', '.join(sorted(networks))}"
            )
        return networks[name]

    @classmethod
    def get_settings(cls, name: str) -> NetworkSettings:
        return NetworkSettings.model_validate(cls.get_network(name))

    @classmethod
    def get_api_url(cls, name: str, override: Optional[str] = None) -> str:
        """
        Resolve the Stacks API base URL.

        Precedence: ``override``, then ``<NAME>_STACKS_API_URL`` from the
        environment, then the preset.
        """
        if override:
            return override.rstrip("/")
        env_var = f"{name.upper().replace('-', '_')}_STACKS_API_URL"
        if os.environ.get(env_var):
            return os.environ[env_var].rstrip("/")
        return cls.get_settings(name).stacks_api.rstrip("/")

    @classmethod
    def get_contract(cls, name: str) -> Tuple[str, str]:
        return cls.get_settings(name).contract
