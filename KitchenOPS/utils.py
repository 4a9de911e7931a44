import json
from pathlib import Path
from typing import Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def load_and_validate(data_path: Union[Path, str], model: Type[ModelT]) -> ModelT:
    """
    Load and validate model data from data_path.
    Returns a validated model instance.

    Raises FileNotFoundError if the file is missing and ValueError if its
    content does not match `model`.
    """
    data_path = Path(data_path)
    if not data_path.exists():
        raise FileNotFoundError(f"Data file not found: {data_path}")

    with data_path.open("r", encoding="utf-8") as f:
        raw_data = json.load(f)
    try:
        return model.model_validate(raw_data)
    except ValidationError as e:
        raise ValueError(f"Validation error for {data_path.name}: {e}") from e
