"""Circulation topology of concept plans.

Rooms are connected when a door on one room's wall lands on the boundary of
another room. A door on the plot boundary, or one that opens onto no other
room, connects the room to the exterior.
"""

from __future__ import annotations

from typing import List

import networkx as nx
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import box

from ..geom.builder import clamp_door_offset
from ..geom.walls import feature_anchor
from .model import ConceptPlan, Door, Room

EXTERIOR = "__exterior__"

# Tolerance (meters) for a door anchor to count as lying on a boundary
BOUNDARY_TOLERANCE = 0.05


def room_key(index: int) -> str:
    """Graph node key of the room at ``index`` (room names may repeat)."""
    return f"room_{index}"


def door_anchor_m(room: Room, door: Door) -> ShapelyPoint:
    """Door anchor in plot meters, using the clamped offset the drawing uses."""
    offset = clamp_door_offset(door.offset_ratio)
    rect = room.rect
    x, y = feature_anchor(rect.x_start, rect.y_start, rect.width, rect.depth, door.wall, offset)
    return ShapelyPoint(x, y)


def _on_plot_boundary(plan: ConceptPlan, anchor: ShapelyPoint) -> bool:
    plot_outline = box(0.0, 0.0, plan.plot.width, plan.plot.depth).exterior
    return plot_outline.distance(anchor) <= BOUNDARY_TOLERANCE


def build_room_graph(plan: ConceptPlan) -> nx.Graph:
    """Build a graph of the rooms connected through doors.

    Nodes are ``room_<index>`` keys carrying the room ``name``, plus the
    ``EXTERIOR`` node. Edges carry the ``wall`` of the door that made them.

    Args:
        plan: The concept plan.

    Returns:
        NetworkX Graph with room connectivity.
    """
    G = nx.Graph()
    G.add_node(EXTERIOR, name="Exterior")

    outlines = []
    for index, room in enumerate(plan.rooms):
        G.add_node(room_key(index), name=room.name)
        r = room.rect
        outlines.append(box(r.x_start, r.y_start, r.x_end, r.y_end).exterior)

    for index, room in enumerate(plan.rooms):
        for door in room.doors:
            anchor = door_anchor_m(room, door)
            neighbours = [
                room_key(other)
                for other, outline in enumerate(outlines)
                if other != index and outline.distance(anchor) <= BOUNDARY_TOLERANCE
            ]
            if not neighbours or _on_plot_boundary(plan, anchor):
                G.add_edge(room_key(index), EXTERIOR, wall=door.wall)
            for neighbour in neighbours:
                G.add_edge(room_key(index), neighbour, wall=door.wall)

    return G


def unreachable_rooms(plan: ConceptPlan) -> List[int]:
    """Indices of rooms that cannot be reached from the exterior through doors."""
    G = build_room_graph(plan)
    reachable = nx.node_connected_component(G, EXTERIOR)
    return [index for index in range(len(plan.rooms)) if room_key(index) not in reachable]

