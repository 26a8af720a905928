# -*- coding: utf-8 -*-
"""
Annotation Composer - Symbol and label form state for map annotations.

An annotation is a military symbol placed on the map: a 20-character
SIDC composed from editable symbol fields, free-text label (amplifier)
fields, and a Point placement. ``AnnotationComposer`` owns the form
state, recomputes the SIDC synchronously on every symbol-field edit,
and produces an ``AnnotationItem`` on submit.

Symbol rasterization is not done here. ``preview_request`` hands the
current code, labels and size to an external rasterizer, tagged with a
sequence number so that late responses for superseded edits can be
discarded by ``accept_preview``.

Author
------
GMTK Contributors

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
import copy
import logging
import uuid
from typing import Any, Callable, Dict, List, Optional

# GMTK internal
from gmtk.catalog.amplifier import AmplifierTable
from gmtk.catalog.lookups import FIELD_LOOKUPS
from gmtk.catalog.models import MainIcon, ModifierOption, SymbolSet
from gmtk.core.config import GmtkConfig
from gmtk.core.coordinates import Coordinate
from gmtk.core.sidc import (
    ENTITY_OFFSET,
    SYMBOL_SET_OFFSET,
    base_sidc,
    compose_sidc,
    normalize_sidc,
)

logger = logging.getLogger(__name__)

# (sidc, label fields, symbol size) -> bitmap, URL or any preview handle
Rasterizer = Callable[[str, Dict[str, str], int], Any]

_FIELD_ALIASES = {
    'symbolSize': 'symbol_size',
    'symbolSet': 'symbol_set',
}


class PlacementRequiredError(ValueError):
    """Raised when an annotation is submitted without a placement."""

    def __init__(self, message: str = "placement required") -> None:
        super().__init__(message)


class AnnotationSymbolItem:
    """Symbol-side form state.

    Parameters
    ----------
    symbol_size : int
        Rendered size in pixels. Must be positive.
    context, identity, status, headquarters : str
        Single-character SIDC codes.
    echelon : str
        Two-character echelon code.
    modifier1, modifier2 : str
        Two-character sector modifier codes; empty means none.
    icon : Optional[MainIcon]
        Catalog icon the symbol was created from.
    symbol_set : str
        Two-digit symbol set code of the icon.

    Raises
    ------
    ValueError
        If ``symbol_size`` is not positive.
    """

    FIELDS = (
        'symbol_size', 'context', 'identity', 'status', 'headquarters',
        'echelon', 'modifier1', 'modifier2', 'icon', 'symbol_set',
    )

    def __init__(
        self,
        symbol_size: int = 40,
        context: str = "0",
        identity: str = "3",
        status: str = "0",
        headquarters: str = "0",
        echelon: str = "00",
        modifier1: str = "",
        modifier2: str = "",
        icon: Optional[MainIcon] = None,
        symbol_set: str = "",
    ) -> None:
        if symbol_size <= 0:
            raise ValueError(f"symbol_size must be positive, got {symbol_size}")
        self.symbol_size = symbol_size
        self.context = context
        self.identity = identity
        self.status = status
        self.headquarters = headquarters
        self.echelon = echelon
        self.modifier1 = modifier1
        self.modifier2 = modifier2
        self.icon = icon
        self.symbol_set = symbol_set

    def to_dict(self) -> dict:
        return {
            'symbolSize': self.symbol_size,
            'context': self.context,
            'identity': self.identity,
            'status': self.status,
            'headquarters': self.headquarters,
            'echelon': self.echelon,
            'modifier1': self.modifier1,
            'modifier2': self.modifier2,
            'icon': self.icon.to_dict() if self.icon else None,
            'symbolSet': self.symbol_set,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'AnnotationSymbolItem':
        icon = data.get('icon')
        return cls(
            symbol_size=int(data.get('symbolSize', 40)),
            context=data.get('context', '0'),
            identity=data.get('identity', '3'),
            status=data.get('status', '0'),
            headquarters=data.get('headquarters', '0'),
            echelon=data.get('echelon', '00'),
            modifier1=data.get('modifier1', ''),
            modifier2=data.get('modifier2', ''),
            icon=MainIcon.from_dict(icon) if icon else None,
            symbol_set=str(data.get('symbolSet') or ''),
        )

    def __repr__(self) -> str:
        return (
            f"AnnotationSymbolItem(set={self.symbol_set!r}, "
            f"size={self.symbol_size}, echelon={self.echelon!r})"
        )


class AnnotationItem:
    """A submitted annotation.

    Parameters
    ----------
    id : str
    sidc : str
        20-character symbol code.
    symbol : AnnotationSymbolItem
    label : Dict[str, str]
        Label field values keyed by amplifier key.
    placement : Coordinate
    """

    def __init__(
        self,
        id: str,
        sidc: str,
        symbol: AnnotationSymbolItem,
        label: Dict[str, str],
        placement: Coordinate,
    ) -> None:
        self.id = id
        self.sidc = sidc
        self.symbol = symbol
        self.label = label
        self.placement = placement

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'sidc': self.sidc,
            'annotationSymbol': self.symbol.to_dict(),
            'annotationLabel': dict(self.label),
            'geometry': self.placement.to_geojson(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'AnnotationItem':
        return cls(
            id=data['id'],
            sidc=data['sidc'],
            symbol=AnnotationSymbolItem.from_dict(data.get('annotationSymbol') or {}),
            label=dict(data.get('annotationLabel') or {}),
            placement=Coordinate.from_geojson(data['geometry']),
        )

    def __repr__(self) -> str:
        return (
            f"AnnotationItem(id={self.id!r}, sidc={self.sidc!r}, "
            f"at=({self.placement.lon:.6f}, {self.placement.lat:.6f}))"
        )


class PreviewRequest:
    """Input for one external rasterization call.

    Parameters
    ----------
    sequence : int
        Monotonic request number; only the latest is accepted back.
    sidc : str
    labels : Dict[str, str]
    size : int
    """

    def __init__(
        self,
        sequence: int,
        sidc: str,
        labels: Dict[str, str],
        size: int,
    ) -> None:
        self.sequence = sequence
        self.sidc = sidc
        self.labels = labels
        self.size = size

    def __repr__(self) -> str:
        return f"PreviewRequest(#{self.sequence}, {self.sidc!r}, size={self.size})"


class AnnotationComposer:
    """Editable annotation form state.

    Parameters
    ----------
    base_sidc : Optional[str]
        Template code the symbol fields are written over. Defaults to
        the configured base template.
    symbol : Optional[AnnotationSymbolItem]
        Initial symbol fields. Defaults to a new item with the
        configured symbol size.
    labels : Optional[Dict[str, str]]
        Initial label values.
    placement : Optional[Coordinate]
    amplifiers : Optional[AmplifierTable]
        Label applicability table. Defaults to the built-in table.
    item_id : Optional[str]
        Id of the annotation being edited; None for a new annotation.
    config : Optional[GmtkConfig]
    """

    def __init__(
        self,
        base_sidc: Optional[str] = None,
        symbol: Optional[AnnotationSymbolItem] = None,
        labels: Optional[Dict[str, str]] = None,
        placement: Optional[Coordinate] = None,
        amplifiers: Optional[AmplifierTable] = None,
        item_id: Optional[str] = None,
        config: Optional[GmtkConfig] = None,
    ) -> None:
        config = config or GmtkConfig()
        self._base = base_sidc if base_sidc is not None else config.default_base_sidc
        self.symbol = symbol or AnnotationSymbolItem(
            symbol_size=config.default_symbol_size,
        )
        self.labels: Dict[str, str] = dict(labels or {})
        self.placement = placement
        self.amplifiers = amplifiers or AmplifierTable()
        self.item_id = item_id
        self.preview: Any = None
        self._sequence = 0
        self._sidc = compose_sidc(self._base, self.symbol)

    @classmethod
    def for_symbol(
        cls,
        symbol_set: SymbolSet,
        icon: MainIcon,
        amplifiers: Optional[AmplifierTable] = None,
        config: Optional[GmtkConfig] = None,
    ) -> 'AnnotationComposer':
        """Start a new annotation from a catalog icon.

        The icon's template code becomes the base and the symbol
        fields start at their defaults.
        """
        config = config or GmtkConfig()
        symbol = AnnotationSymbolItem(
            symbol_size=config.default_symbol_size,
            icon=icon,
            symbol_set=symbol_set.symbolset,
        )
        return cls(
            base_sidc=base_sidc(symbol_set.symbolset, icon.code),
            symbol=symbol,
            amplifiers=amplifiers,
            config=config,
        )

    @classmethod
    def from_item(
        cls,
        item: AnnotationItem,
        amplifiers: Optional[AmplifierTable] = None,
        config: Optional[GmtkConfig] = None,
    ) -> 'AnnotationComposer':
        """Re-open a submitted annotation for editing.

        The item's code becomes the base, so fields the form does not
        edit are carried over unchanged. Submitting keeps the item id.
        """
        return cls(
            base_sidc=item.sidc,
            symbol=copy.deepcopy(item.symbol),
            labels=item.label,
            placement=item.placement,
            amplifiers=amplifiers,
            item_id=item.id,
            config=config,
        )

    @property
    def sidc(self) -> str:
        """Current 20-character code."""
        return self._sidc

    @property
    def is_editing(self) -> bool:
        return self.item_id is not None

    def set_placement(self, coord: Coordinate) -> None:
        """Record where the annotation is placed."""
        self.placement = coord
        logger.debug("Annotation placed at (%.6f, %.6f)", coord.lon, coord.lat)

    def update_symbol_field(self, name: str, value: Any) -> str:
        """Set one symbol field and recompute the code.

        Changing the icon or symbol set rewrites those offsets of the
        base code as well.

        Parameters
        ----------
        name : str
            Field name, snake_case or the camelCase form keys
            ('symbolSize', 'symbolSet').
        value : Any

        Returns
        -------
        str
            The recomputed SIDC.

        Raises
        ------
        KeyError
            If ``name`` is not a symbol field.
        ValueError
            If a non-positive symbol size is given.
        """
        attr = _FIELD_ALIASES.get(name, name)
        if attr not in AnnotationSymbolItem.FIELDS:
            raise KeyError(f"Unknown symbol field: {name!r}")
        if attr == 'symbol_size':
            value = int(value)
            if value <= 0:
                raise ValueError(f"symbol_size must be positive, got {value}")
        elif attr != 'icon' and value is None:
            value = ""
        setattr(self.symbol, attr, value)
        if attr in ('icon', 'symbol_set'):
            self._base = self._rebased()
        self._sidc = compose_sidc(self._base, self.symbol)
        logger.debug("Symbol field %s=%r -> %s", attr, value, self._sidc)
        return self._sidc

    def update_label_field(self, name: str, value: str) -> None:
        """Set one label field. Inapplicable keys are dropped on submit."""
        self.labels[name] = value

    def available_label_fields(self) -> List[str]:
        """Ordered label keys applicable to the current symbol set."""
        return self.amplifiers.fields_for(self.symbol.symbol_set)

    def symbol_field_options(
        self,
        name: str,
        symbol_set: Optional[SymbolSet] = None,
    ) -> List[ModifierOption]:
        """Selectable codes for a symbol field.

        Sector modifiers come from ``symbol_set``; without one there
        are no modifier options.

        Raises
        ------
        KeyError
            If the field has no option list.
        """
        if name == 'modifier1':
            return list(symbol_set.modifier1) if symbol_set else []
        if name == 'modifier2':
            return list(symbol_set.modifier2) if symbol_set else []
        return list(FIELD_LOOKUPS[name])

    def submit(self) -> AnnotationItem:
        """Produce the annotation record.

        Returns
        -------
        AnnotationItem
            New id for new annotations, the existing id when editing.

        Raises
        ------
        PlacementRequiredError
            If no placement has been set.
        """
        if self.placement is None:
            raise PlacementRequiredError()

        labels = self._applicable_labels()
        dropped = sorted(set(self.labels) - set(labels))
        if dropped:
            logger.debug("Dropping inapplicable label fields: %s", dropped)

        item = AnnotationItem(
            id=self.item_id or uuid.uuid4().hex,
            sidc=self._sidc,
            symbol=copy.deepcopy(self.symbol),
            label=labels,
            placement=self.placement,
        )
        logger.debug("Submitted annotation %s (%s)", item.id, item.sidc)
        return item

    def _applicable_labels(self) -> Dict[str, str]:
        allowed = set(self.available_label_fields())
        return {k: v for k, v in self.labels.items() if k in allowed}

    def _rebased(self) -> str:
        """Base code with the symbol set and entity of the current icon."""
        base = normalize_sidc(self._base)
        symbol_set = (
            self.symbol.symbol_set
            or base[SYMBOL_SET_OFFSET:SYMBOL_SET_OFFSET + 2]
        )
        icon = self.symbol.icon
        if icon is not None:
            entity = icon.code
        else:
            entity = base[ENTITY_OFFSET:ENTITY_OFFSET + 6]
        return (
            base[:SYMBOL_SET_OFFSET]
            + str(symbol_set).zfill(2)
            + base[SYMBOL_SET_OFFSET + 2:ENTITY_OFFSET]
            + str(entity).zfill(6)
            + base[ENTITY_OFFSET + 6:]
        )

    def preview_request(self) -> PreviewRequest:
        """Issue a rasterization request for the current state.

        Each call supersedes every earlier request.
        """
        self._sequence += 1
        return PreviewRequest(
            sequence=self._sequence,
            sidc=self._sidc,
            labels=self._applicable_labels(),
            size=self.symbol.symbol_size,
        )

    def accept_preview(self, request: PreviewRequest, result: Any) -> bool:
        """Keep a rasterizer result if its request is still the latest.

        Returns
        -------
        bool
            False when the result is stale and was discarded.
        """
        if request.sequence != self._sequence:
            logger.debug(
                "Discarding stale preview #%d (latest #%d)",
                request.sequence, self._sequence,
            )
            return False
        self.preview = result
        return True

    def render_preview(self, rasterizer: Rasterizer) -> Any:
        """Rasterize the current state synchronously and keep the result."""
        request = self.preview_request()
        result = rasterizer(request.sidc, request.labels, request.size)
        self.accept_preview(request, result)
        return result
