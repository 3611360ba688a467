"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict
from datetime import datetime

from fastapi import FastAPI, Header, HTTPException, Request, Response, status

from foodcheck.api.catalog import router as catalog_router
from foodcheck.api.models import NoteUpdate, RecipeRequest, SaveAnalysisRequest
from foodcheck.app_logging import configure_logging
from foodcheck.containers import AppContainer
from foodcheck.domain.history import AnalysisRecord
from foodcheck.services.history import RecordFilter
from foodcheck.services.recipes import EmptyRecipeError, RecipeIngredient
from foodcheck.services.scoring import MalformedAnalysisError
from foodcheck.services.user_lists import UnknownListError


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="FoodCheck", lifespan=lifespan)
    app.state.container = container

    app.include_router(catalog_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/analyses/image")
    async def analyze_image(
        request: Request,
        food_name: str = "",
        x_health_context: str | None = Header(default=None),
    ) -> dict[str, object]:
        """Analyze a label photo sent as the raw request body and store it."""
        state_container: AppContainer = request.app.state.container
        image_bytes = await request.body()
        if not image_bytes:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="Request body must contain an image",
            )
        try:
            analysis = await state_container.analysis_service.analyze(
                image_bytes, health_context=x_health_context
            )
        except MalformedAnalysisError as exc:
            logger.warning("Rejected label analysis: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
            ) from exc
        record = state_container.history_service.save(food_name, analysis)
        return _serialize_record(record)

    @app.post("/analyses")
    async def save_analysis(
        payload: SaveAnalysisRequest, request: Request
    ) -> dict[str, object]:
        """Validate a raw analysis payload and store it."""
        state_container: AppContainer = request.app.state.container
        try:
            analysis = state_container.aggregator.validate(payload.analysis)
        except MalformedAnalysisError as exc:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
            ) from exc
        record = state_container.history_service.save(
            payload.food_name,
            analysis,
            image_url=payload.image_url,
            user_notes=payload.user_notes,
        )
        return _serialize_record(record)

    @app.get("/analyses")
    async def list_analyses(  # noqa: PLR0913
        request: Request,
        q: str | None = None,
        min_score: int | None = None,
        max_score: int | None = None,
        band: str | None = None,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
        limit: int | None = None,
    ) -> dict[str, object]:
        """Return stored analyses, most recent first."""
        history = request.app.state.container.history_service
        records = history.filter(
            RecordFilter(
                min_score=min_score,
                max_score=max_score,
                date_from=date_from,
                date_to=date_to,
                band=band,
                query=q or None,
            )
        )
        if limit is not None:
            records = records[: max(limit, 0)]
        return {"records": [_serialize_record(record) for record in records]}

    @app.delete("/analyses", status_code=status.HTTP_204_NO_CONTENT)
    async def clear_analyses(request: Request) -> None:
        """Remove the whole history."""
        request.app.state.container.history_service.clear()

    @app.get("/analyses/export.csv")
    async def export_analyses(request: Request) -> Response:
        """Download the history as CSV."""
        content = request.app.state.container.history_service.export_csv()
        return _csv_response(content, "foodcheck-history.csv")

    @app.get("/analyses/{record_id}")
    async def get_analysis(record_id: str, request: Request) -> dict[str, object]:
        record = request.app.state.container.history_service.get_by_id(record_id)
        if record is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return _serialize_record(record)

    @app.delete("/analyses/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_analysis(record_id: str, request: Request) -> None:
        if not request.app.state.container.history_service.delete(record_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)

    @app.patch("/analyses/{record_id}/note")
    async def update_note(
        record_id: str, payload: NoteUpdate, request: Request
    ) -> dict[str, object]:
        """Replace the user note on a stored analysis."""
        history = request.app.state.container.history_service
        if not history.update_note(record_id, payload.notes):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return _serialize_record(history.get_by_id(record_id))

    @app.post("/recipes/analyze")
    async def analyze_recipe(
        payload: RecipeRequest, request: Request
    ) -> dict[str, object]:
        """Score a recipe built from catalog entries, optionally storing it."""
        state_container: AppContainer = request.app.state.container
        catalog = state_container.catalog_service
        ingredients = [
            RecipeIngredient(
                food=catalog.get_item(entry.food_id),
                amount=entry.amount,
                unit=entry.unit,
            )
            for entry in payload.ingredients
        ]
        try:
            analysis = state_container.recipe_analyzer.analyze(
                payload.name, payload.servings, ingredients
            )
        except EmptyRecipeError as exc:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
            ) from exc
        if payload.save:
            record = state_container.history_service.save(payload.name, analysis)
            return _serialize_record(record)
        return {"analysis": analysis.model_dump(mode="json")}

    @app.get("/stats")
    async def stats(request: Request) -> dict[str, object]:
        """Aggregate statistics over the stored history."""
        return asdict(request.app.state.container.stats_service.get_stats())

    @app.get("/stats/trends")
    async def trends(request: Request) -> dict[str, object]:
        metrics = request.app.state.container.stats_service.get_trends()
        return {"metrics": [asdict(metric) for metric in metrics]}

    @app.get("/stats/trends.csv")
    async def export_trends(request: Request) -> Response:
        content = request.app.state.container.stats_service.export_trends_csv()
        return _csv_response(content, "foodcheck-trends.csv")

    @app.get("/lists/{list_name}")
    async def list_items(list_name: str, request: Request) -> dict[str, object]:
        """Catalog ids in the favorites or shopping list."""
        lists = request.app.state.container.user_list_service
        try:
            return {"items": lists.items(list_name)}
        except UnknownListError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from exc

    @app.post("/lists/{list_name}/{item_id}/toggle")
    async def toggle_list_item(
        list_name: str, item_id: str, request: Request
    ) -> dict[str, object]:
        lists = request.app.state.container.user_list_service
        try:
            present = lists.toggle(list_name, item_id)
        except UnknownListError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from exc
        return {"item_id": item_id, "present": present}

    return app


def _serialize_record(record: AnalysisRecord | None) -> dict[str, object]:
    if record is None:
        return {}
    return {**record.model_dump(mode="json"), "vish_score": record.vish_score}


def _csv_response(content: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
