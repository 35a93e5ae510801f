import logging
from typing import Any, Dict, Optional

import requests
from rfp_assistant.core.config import Settings
from rfp_assistant.schemas.rfp import ParsedRequest


logger = logging.getLogger(__name__)


class RFPServiceError(RuntimeError):
    pass


class RFPServiceClient:
    """Cliente del servicio externo que persiste las RFP confirmadas."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None, settings: Optional[Settings] = None):
        if base_url is None or timeout is None:
            settings = settings or Settings()
        self.base_url = (base_url or settings.rfp_service_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.rfp_service_timeout

    def create_rfp(self, draft: ParsedRequest) -> Dict[str, Any]:
        """Envía el borrador tal cual; devuelve {"message", "data"} del servicio."""
        url = self.base_url + "/api/rfp"
        try:
            response = requests.post(url, json=draft.to_payload(), timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            content = getattr(exc.response, "text", "")
            if content:
                logger.error("RFP service request failed: %s", content)
            else:
                logger.error("RFP service request failed: %s", exc)
            raise RFPServiceError(
                f"Error calling RFP service at {url}: {content or exc}"
            ) from exc

        try:
            result = response.json()
            return {
                "message": result.get("message", "RFP created"),
                "data": result.get("data") or {},
            }
        except (ValueError, AttributeError) as exc:
            logger.error("RFP service returned an unexpected body: %s", response.text)
            raise RFPServiceError(
                f"Unexpected response from RFP service at {url}: {response.text}"
            ) from exc


def get_rfp_client() -> RFPServiceClient:
    return RFPServiceClient()
