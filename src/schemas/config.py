"""User configuration schema."""

from pathlib import Path

from pydantic import BaseModel

DEFAULT_IMAGE_DIR = Path(".")


class ApodConfig(BaseModel):
    """Settings read from the ``~/.apod`` JSON file.

    Both keys are optional; an empty or missing file yields the defaults.

    Attributes:
        api_key: api.nasa.gov key, DEMO_KEY is used when absent
        image_dir: Directory images are written to, defaults to the
                   current working directory
    """

    api_key: str | None = None
    image_dir: Path | None = None

    model_config = {"frozen": True, "extra": "ignore"}

    @property
    def output_dir(self) -> Path:
        return self.image_dir if self.image_dir is not None else DEFAULT_IMAGE_DIR
