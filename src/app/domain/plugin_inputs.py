"""Campos do protocolo kernel → plugin carregados no payload do webhook."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.domain.plugin_settings import PluginSettings


class PluginInputs(BaseModel):
    """Visão tipada do payload já verificado (sem `signature`)."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    state_id: str = Field(default="", alias="stateId")
    event_name: str = Field(default="", alias="eventName")
    event_payload: dict[str, Any] = Field(default_factory=dict, alias="eventPayload")
    settings: PluginSettings = Field(default_factory=PluginSettings)
    auth_token: str = Field(default="", alias="authToken")
    ref: str = ""

    @property
    def comment_body(self) -> str:
        """Corpo do comentário para eventos `issue_comment.*` (vazio se ausente)."""
        comment = self.event_payload.get("comment")
        if not isinstance(comment, dict):
            return ""
        body = comment.get("body")
        return body if isinstance(body, str) else ""
