"""JuiceBox Factory.

A directory and review service for discovering, comparing and rating
developer tools.

High-level architecture
-----------------------

- ``juicebox_factory.core``: logging, monitoring, the error taxonomy, the
  SQLModel persistence layer (entities and repositories) and the pydantic
  I/O models exposed by the API.
- ``juicebox_factory.scoring``: the four metric calculators and the score
  aggregator that persists one score record per tool.
- ``juicebox_factory.comparison``: similarity ranking, comparison matrices
  and preference-weighted recommendations.
- ``juicebox_factory.search``: query tokenization, synonym expansion and
  relevance ranking over the catalog.
- ``juicebox_factory.ai``: the text-generation strategy (live LLM provider or
  deterministic heuristics).
- ``juicebox_factory.discovery``: GitHub / NPM discovery sources and the
  discovery pipeline.
- ``juicebox_factory.notifications``: persisted notifications and the
  in-process pub/sub broker.
- ``juicebox_factory.server``: the FastAPI application and its routers.
"""

__version__ = "0.1.0"
