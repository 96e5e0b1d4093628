"""Assets, flipbooks and the keyed asset registry."""

from __future__ import annotations

import enum
from typing import Callable, Iterable, Iterator, Mapping

from roomcrawl.core import Base


class AssetType(enum.Enum):
    TEXTURE = "texture"
    SPRITE = "sprite"
    FLIPBOOK = "flipbook"
    SOUND = "sound"


def _extension(path: str) -> str:
    filename = path[max(path.rfind("/"), path.rfind("\\")) + 1:]
    dot = filename.rfind(".")
    return filename[dot:] if dot >= 0 else ""


def check_ext(ext: str, path: str) -> str:
    """Return ``path`` ending in ``ext``, appending or replacing the extension."""
    current = _extension(path)
    if current == ext:
        return path
    if not current:
        return path + ext
    return path[: path.find(current)] + ext


class Asset(Base):
    """A resource registered under a key, remembering where it came from."""

    def __init__(self, kind: AssetType) -> None:
        super().__init__()
        self._kind = kind
        self.key = ""
        self.relative_path = ""

    @property
    def kind(self) -> AssetType:
        return self._kind


class Flipbook(Asset):
    """An ordered sequence of sprites played as an animation."""

    def __init__(self, sprites: Iterable[object] | None = None) -> None:
        super().__init__(AssetType.FLIPBOOK)
        self._sprites = list(sprites) if sprites is not None else []

    def add_sprite(self, sprite: object) -> None:
        self._sprites.append(sprite)

    def get_sprite(self, index: int) -> object:
        if not 0 <= index < len(self._sprites):
            raise IndexError(f"sprite index {index} out of range")
        return self._sprites[index]

    def sprite_count(self) -> int:
        return len(self._sprites)

    def __len__(self) -> int:
        return len(self._sprites)

    def __iter__(self) -> Iterator[object]:
        return iter(self._sprites)


class DuplicateAssetError(ValueError):
    """Raised when a key is registered twice for the same asset type."""


Loader = Callable[[str], Asset]


class AssetManager:
    """Registry of assets per type, loading each key at most once."""

    def __init__(self, loaders: Mapping[AssetType, Loader] | None = None) -> None:
        self._loaders = dict(loaders or {})
        self._assets: dict[AssetType, dict[str, Asset]] = {kind: {} for kind in AssetType}

    def find(self, kind: AssetType, key: str) -> Asset | None:
        return self._assets[kind].get(key)

    def load(self, kind: AssetType, key: str, relative_path: str) -> Asset:
        """Return the asset under ``key``, loading it from ``relative_path`` first if needed."""
        existing = self.find(kind, key)
        if existing is not None:
            return existing
        try:
            loader = self._loaders[kind]
        except KeyError:
            raise KeyError(f"no loader registered for {kind.value} assets") from None
        asset = loader(relative_path)
        asset.key = key
        asset.relative_path = relative_path
        self._assets[kind][key] = asset
        return asset

    def create(self, kind: AssetType, key: str, factory: Callable[[], Asset]) -> Asset:
        """Build a new asset with ``factory`` and register it under ``key``."""
        self._ensure_absent(kind, key)
        asset = factory()
        asset.key = key
        self._assets[kind][key] = asset
        return asset

    def add(self, kind: AssetType, key: str, asset: Asset) -> None:
        """Register an existing asset under ``key``."""
        self._ensure_absent(kind, key)
        asset.key = key
        self._assets[kind][key] = asset

    def _ensure_absent(self, kind: AssetType, key: str) -> None:
        if key in self._assets[kind]:
            raise DuplicateAssetError(f"{kind.value} asset {key!r} already registered")