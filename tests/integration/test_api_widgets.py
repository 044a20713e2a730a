"""
Integration tests for the models, comparisons, widgets and page endpoints.
Uses TestClient with a real container wired to FakeFaceProvider (no DeepFace,
no model weights). Images are tiny PNGs written to tmp_path and referenced by
absolute path.
Note: Runs full app lifespan (slower). Use: pytest tests/unit/ for fast unit-only runs.
"""
import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from face_gallery.di.container import DIContainer, set_container
from face_gallery.infrastructure.images import ImageLoader
from face_gallery.processing.models import ModelReadiness


@pytest.fixture
def container(fake_provider, gallery_images, tmp_path):
    _, faces = gallery_images
    fake_provider.faces = faces
    container = DIContainer(face_provider=fake_provider)
    # Test images live in tmp_path; serve it as the image root
    container.get(ImageLoader).image_root = tmp_path
    container.get(ModelReadiness).mark_ready()
    return container


@pytest.fixture
def paths(gallery_images):
    return gallery_images[0]


@pytest.fixture
def client(container):
    """Create test client backed by the injected container."""
    from face_gallery.main import app

    set_container(container)
    try:
        with TestClient(app) as c:
            # Let the startup model-loading task finish before tests touch readiness
            c.get("/health")
            yield c
    finally:
        set_container(None)


class TestModelsAPI:
    """Tests for /api/v1/models endpoints"""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_status(self, client):
        response = client.get("/api/v1/models/status")
        assert response.status_code == 200
        data = response.json()
        assert data["state"] == "ready"
        assert data["ready"] is True
        assert data["capabilities"]["descriptor_extractor"] == "fake-recognizer"
        assert data["policy"] in ("pairwise", "matcher")

    def test_load_after_failure(self, client, container):
        container.get(ModelReadiness).mark_failed("weights missing")
        response = client.get("/api/v1/models/status")
        assert response.json()["state"] == "failed"
        assert response.json()["error"] == "weights missing"

        response = client.post("/api/v1/models/load")
        assert response.status_code == 200
        assert response.json()["state"] == "ready"


class TestComparisonsAPI:
    """Tests for /api/v1/comparisons"""

    def test_single_match(self, client, paths):
        response = client.post(
            "/api/v1/comparisons",
            json={"main_image": paths["main"], "gallery": [paths["a"], paths["b"], paths["c"]]},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "completed"
        assert data["matched"] == [paths["a"]]
        assert data["fallback_used"] is False
        assert [s["image_ref"] for s in data["scores"]] == [paths["a"], paths["b"]]

    def test_fallback(self, client, paths):
        response = client.post(
            "/api/v1/comparisons",
            json={"main_image": paths["main"], "gallery": [paths["b"], paths["b_close"], paths["c"]]},
        )
        data = response.json()
        assert data["matched"] == [paths["b_close"]]
        assert data["fallback_used"] is True

    def test_no_face_in_main(self, client, paths):
        response = client.post(
            "/api/v1/comparisons",
            json={"main_image": paths["c"], "gallery": [paths["a"]]},
        )
        data = response.json()
        assert data["status"] == "no_face_in_main"
        assert data["matched"] == []

    def test_missing_main_image_file(self, client, paths, tmp_path):
        response = client.post(
            "/api/v1/comparisons",
            json={"main_image": str(tmp_path / "nope.png"), "gallery": [paths["a"]]},
        )
        assert response.json()["status"] == "no_face_in_main"

    def test_main_image_outside_image_root(self, client, paths, fake_provider):
        response = client.post(
            "/api/v1/comparisons",
            json={"main_image": "/etc/passwd", "gallery": [paths["a"]]},
        )
        assert response.json()["status"] == "no_face_in_main"
        assert fake_provider.describe_calls == 0

    def test_skipped_when_not_ready(self, client, container, paths, fake_provider):
        container.get(ModelReadiness).mark_failed("weights missing")
        response = client.post(
            "/api/v1/comparisons",
            json={"main_image": paths["main"], "gallery": [paths["a"]]},
        )
        assert response.json()["status"] == "skipped_not_ready"
        assert fake_provider.describe_calls == 0

    def test_empty_main_image_rejected(self, client):
        response = client.post("/api/v1/comparisons", json={"main_image": "", "gallery": []})
        assert response.status_code == 422


class TestWidgetsAPI:
    """Tests for /api/v1/widgets endpoints"""

    def _create(self, client, paths, widget_id="w1"):
        return client.post(
            "/api/v1/widgets",
            json={"id": widget_id, "main_image": paths["main"], "gallery": [paths["a"], paths["b"], paths["c"]]},
        )

    def test_create_runs_comparison(self, client, paths):
        response = self._create(client, paths)
        assert response.status_code == 201
        data = response.json()
        assert data["id"] == "w1"
        assert data["matched"] == [paths["a"]]
        assert data["generation"] == 1
        assert data["last_result"]["status"] == "completed"

    def test_create_duplicate_returns_400(self, client, paths):
        self._create(client, paths)
        response = self._create(client, paths)
        assert response.status_code == 400

    def test_default_widget_created_on_startup(self, client):
        response = client.get("/api/v1/widgets/default")
        assert response.status_code == 200
        assert len(response.json()["gallery"]) == 10

    def test_list(self, client, paths):
        self._create(client, paths)
        ids = [w["id"] for w in client.get("/api/v1/widgets").json()]
        assert "w1" in ids
        assert "default" in ids

    def test_get_unknown_returns_404(self, client):
        response = client.get("/api/v1/widgets/missing")
        assert response.status_code == 404

    def test_update_main_image(self, client, paths):
        self._create(client, paths)
        response = client.put("/api/v1/widgets/w1/main-image", json={"main_image": paths["c"]})
        assert response.status_code == 200
        data = response.json()
        assert data["matched"] == []
        assert data["last_result"]["status"] == "no_face_in_main"
        assert data["generation"] == 2

    def test_update_main_image_empty_rejected(self, client, paths):
        self._create(client, paths)
        response = client.put("/api/v1/widgets/w1/main-image", json={"main_image": ""})
        assert response.status_code == 422

    def test_update_gallery(self, client, paths):
        self._create(client, paths)
        response = client.put(
            "/api/v1/widgets/w1/gallery",
            json={"gallery": [paths["b"], paths["b_close"]]},
        )
        data = response.json()
        assert data["gallery"] == [paths["b"], paths["b_close"]]
        assert data["matched"] == [paths["b_close"]]

    def test_empty_gallery_clears_matches(self, client, paths):
        self._create(client, paths)
        response = client.put("/api/v1/widgets/w1/gallery", json={"gallery": []})
        assert response.status_code == 200
        assert response.json()["matched"] == []

    def test_update_unknown_returns_404(self, client):
        response = client.put("/api/v1/widgets/missing/gallery", json={"gallery": []})
        assert response.status_code == 404

    def test_refresh(self, client, paths):
        self._create(client, paths)
        response = client.post("/api/v1/widgets/w1/refresh")
        assert response.status_code == 200
        assert response.json()["matched"] == [paths["a"]]
        assert client.get("/api/v1/widgets/w1").json()["generation"] == 2

    def test_delete(self, client, paths):
        self._create(client, paths)
        response = client.delete("/api/v1/widgets/w1")
        assert response.status_code == 204
        assert client.get("/api/v1/widgets/w1").status_code == 404
        assert client.delete("/api/v1/widgets/w1").status_code == 404


class TestPages:
    """Tests for the HTML widget pages"""

    def test_widget_page(self, client, paths):
        client.post(
            "/api/v1/widgets",
            json={"id": "w1", "main_image": paths["main"], "gallery": [paths["a"], paths["b"]]},
        )
        response = client.get("/widgets/w1")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "Matched Images" in response.text
        assert "No matching images found." not in response.text

    def test_default_page_before_any_run(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "No matching images found." in response.text

    def test_unknown_page_returns_404(self, client):
        assert client.get("/widgets/missing").status_code == 404
