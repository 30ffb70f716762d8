"""
Model routing.

Targets with a dedicated Helsinki-NLP model go straight to it; everything
else goes to the multilingual mBART-50 model, which needs explicit source
and target language codes in the request.
"""

from __future__ import annotations

from dataclasses import dataclass

from knowindia.i18n.languages import MBART, LanguageRegistry, get_language_registry


DEFAULT_ROUTE = "default"

# Dedicated en->X models
TRANSLATION_MODELS: dict[str, str] = {
    "hi": "Helsinki-NLP/opus-mt-en-hi",
    "ur": "Helsinki-NLP/opus-mt-en-ur",
}


@dataclass(frozen=True)
class ModelRoute:
    """Where a translation request is sent."""

    model_id: str
    url: str
    needs_language_params: bool = False


class ModelRouter:
    """Picks the model endpoint for a target language. Never fails."""

    def __init__(
        self,
        api_base: str,
        default_model: str = "facebook/mbart-large-50-many-to-many-mmt",
        routes: dict[str, str] | None = None,
        registry: LanguageRegistry | None = None,
    ):
        self.api_base = api_base.rstrip("/")
        self.registry = registry or get_language_registry()
        self._routes: dict[str, ModelRoute] = {
            code: ModelRoute(model_id=model, url=self._url(model))
            for code, model in (routes if routes is not None else TRANSLATION_MODELS).items()
        }
        self._default = ModelRoute(
            model_id=default_model,
            url=self._url(default_model),
            needs_language_params=True,
        )

    def _url(self, model_id: str) -> str:
        return f"{self.api_base}/{model_id}"

    def route_for(self, target: str) -> ModelRoute:
        """Dedicated route for the target, or the default multilingual one."""
        return self._routes.get(target, self._default)

    @property
    def default_route(self) -> ModelRoute:
        return self._default

    def can_serve(self, source: str, target: str) -> bool:
        """
        Whether the chosen route can express this language pair.

        The multilingual model needs its own code for the target; the source
        falls back to English when it has none.
        """
        route = self.route_for(target)
        if not route.needs_language_params:
            return True
        return self.registry.model_code(target, MBART) is not None
