from .config import KernelConfig, configure_logging, get_kernel_config, set_kernel_config
from .errors import ArgumentNullError, ArgumentOutOfRangeError, KernelError, UniqueAnchorError
from .coordinate import (
    Coordinate,
    array_to_coordinates,
    centroid,
    coordinates_to_array,
    distance,
    distance_2d,
    distance_3d,
)
from .vector import CoordinateVector, cross_product_3d, dot_product_2d, dot_product_3d, perp_dot_product
from .precision import (
    PrecisionModel,
    PrecisionModelType,
    default_precision_model,
    least_precise,
    most_precise,
)
from .orientation import Orientation, angle, orientation
from .envelope import (
    Envelope,
    box_contains_coordinate,
    collection_contains,
    collections_disjoint,
    collections_intersect,
    contains_coordinates,
    crosses_coordinates,
    disjoint_coordinates,
    equals_coordinates,
    intersects_coordinates,
    overlaps_coordinates,
    touches_coordinates,
    within_coordinates,
)
from .ring import CoordinateRing, canonical_anchor
from .comparer import CoordinateComparer, GeometryComparer, GeometryKind, geometry_kind

__all__ = [
    'KernelConfig',
    'configure_logging',
    'get_kernel_config',
    'set_kernel_config',
    'KernelError',
    'ArgumentNullError',
    'ArgumentOutOfRangeError',
    'UniqueAnchorError',
    'Coordinate',
    'array_to_coordinates',
    'centroid',
    'coordinates_to_array',
    'distance',
    'distance_2d',
    'distance_3d',
    'CoordinateVector',
    'cross_product_3d',
    'dot_product_2d',
    'dot_product_3d',
    'perp_dot_product',
    'PrecisionModel',
    'PrecisionModelType',
    'default_precision_model',
    'least_precise',
    'most_precise',
    'Orientation',
    'angle',
    'orientation',
    'Envelope',
    'box_contains_coordinate',
    'collection_contains',
    'collections_disjoint',
    'collections_intersect',
    'contains_coordinates',
    'crosses_coordinates',
    'disjoint_coordinates',
    'equals_coordinates',
    'intersects_coordinates',
    'overlaps_coordinates',
    'touches_coordinates',
    'within_coordinates',
    'CoordinateRing',
    'canonical_anchor',
    'CoordinateComparer',
    'GeometryComparer',
    'GeometryKind',
    'geometry_kind',
]
