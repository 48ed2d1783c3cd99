"""Skeletal animation: bones with keyframes and the XML skeleton format."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Protocol

from .image import Image
from .mathutil import wrap_value


class MatrixRenderer(Protocol):
    def push_matrix(self) -> None: ...

    def pop_matrix(self) -> None: ...

    def translate_matrix(self, x: float, y: float, z: float) -> None: ...

    def rotate_matrix(self, angle: float, x: float, y: float, z: float) -> None: ...

    def draw_image(self, image: Image, x: float, y: float, frame: int,
                   width: float, height: float, angle: float) -> None: ...


@dataclass(frozen=True)
class Frame:
    """A keyframe of a bone: translation, rotation in degrees and scale."""

    frame_id: int
    translation_x: float = 0.0
    translation_y: float = 0.0
    rotation: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0


def _interpolate(f: int, prev_id: int, next_id: int,
                 prev_val: float, next_val: float) -> float:
    return prev_val + (next_val - prev_val) * (f - prev_id) / (next_id - prev_id)


class Bone:
    """A node of a skeleton, animated by keyframes and owning child bones."""

    def __init__(self, bone_id: str = "", image: Image | None = None,
                 pivot_x: float = 0.0, pivot_y: float = 0.0,
                 handle_x: float = 0.0, handle_y: float = 0.0) -> None:
        self.bone_id = bone_id
        self.image = image
        self.pivot_x = pivot_x
        self.pivot_y = pivot_y
        self.handle_x = handle_x
        self.handle_y = handle_y
        self.children: list[Bone] = []
        self.frames: list[Frame] = []
        self.current_x = 0.0
        self.current_y = 0.0
        self.current_rotation = 0.0
        self.current_scale_x = 1.0
        self.current_scale_y = 1.0

    def add_child(self, bone: Bone) -> None:
        self.children.append(bone)

    def add_frame(self, frame: Frame) -> None:
        self.frames.append(frame)

    def find_child(self, bone_id: str) -> Bone | None:
        """Find a descendant by id, looking at direct children first."""
        for child in self.children:
            if child.bone_id == bone_id:
                return child
        for child in self.children:
            found = child.find_child(bone_id)
            if found is not None:
                return found
        return None

    def find_frame(self, frame_id: int) -> Frame | None:
        return next((f for f in self.frames if f.frame_id == frame_id), None)

    def _neighbours(self, f: int) -> tuple[Frame | None, Frame | None, Frame | None]:
        exact = prev = nxt = None
        for frame in self.frames:
            if frame.frame_id == f:
                exact = frame
            if frame.frame_id < f and (prev is None or prev.frame_id < frame.frame_id):
                prev = frame
            if frame.frame_id > f and (nxt is None or nxt.frame_id > frame.frame_id):
                nxt = frame
        return exact, prev, nxt

    def _pair(self, f: int, attr_x: str, attr_y: str) -> tuple[float, float]:
        exact, prev, nxt = self._neighbours(f)
        if exact is not None:
            return getattr(exact, attr_x), getattr(exact, attr_y)
        if prev is not None and nxt is not None:
            return (
                _interpolate(f, prev.frame_id, nxt.frame_id,
                             getattr(prev, attr_x), getattr(nxt, attr_x)),
                _interpolate(f, prev.frame_id, nxt.frame_id,
                             getattr(prev, attr_y), getattr(nxt, attr_y)),
            )
        return 0.0, 0.0

    def translation_for_frame(self, f: int) -> tuple[float, float]:
        return self._pair(f, "translation_x", "translation_y")

    def rotation_for_frame(self, f: int) -> float:
        exact, prev, nxt = self._neighbours(f)
        if exact is not None:
            return exact.rotation
        if prev is not None and nxt is not None:
            value = _interpolate(f, prev.frame_id, nxt.frame_id,
                                 prev.rotation, nxt.rotation)
            return wrap_value(value, 360)
        return 0.0

    def scale_for_frame(self, f: int) -> tuple[float, float]:
        return self._pair(f, "scale_x", "scale_y")

    def update(self, current_frame: int) -> None:
        """Pose this bone and its descendants for ``current_frame``."""
        self.current_x, self.current_y = self.translation_for_frame(current_frame)
        self.current_rotation = self.rotation_for_frame(current_frame)
        self.current_scale_x, self.current_scale_y = self.scale_for_frame(current_frame)
        for child in self.children:
            child.update(current_frame)

    def render(self, renderer: MatrixRenderer) -> None:
        renderer.push_matrix()
        renderer.translate_matrix(self.current_x, self.current_y, 0)
        renderer.rotate_matrix(self.current_rotation, 0, 0, -1)
        if self.image is not None:
            width = self.image.frame_width
            height = self.image.frame_height
            self.image.set_handle(self.handle_x * width, self.handle_y * height)
            renderer.draw_image(self.image, 0, 0, 0,
                                width * self.current_scale_x,
                                height * self.current_scale_y, 0)
            renderer.translate_matrix(self.pivot_x * width, self.pivot_y * height, 0)
        for child in self.children:
            child.render(renderer)
        renderer.pop_matrix()


@dataclass
class BoneData:
    """Bone description as read from a skeleton file."""

    bone_id: str
    parent_name: str
    image_filename: str
    pivot_x: float = 0.0
    pivot_y: float = 0.0
    handle_x: float = 0.0
    handle_y: float = 0.0
    frames: list[Frame] = field(default_factory=list)


def _parse_frame(node: ET.Element) -> Frame:
    translate = node.find("translate")
    rotate = node.find("rotate")
    scale = node.find("scale")
    if translate is None or rotate is None or scale is None:
        raise ValueError("frame needs translate, rotate and scale nodes")
    return Frame(
        frame_id=int(float(node.attrib["m_id"]) - 1),
        translation_x=float(translate.attrib["m_x"]),
        translation_y=float(translate.attrib["m_y"]),
        rotation=float(rotate.attrib["z"]),
        scale_x=float(scale.attrib["m_x"]),
        scale_y=float(scale.attrib["m_y"]),
    )


@dataclass
class SkeletonData:
    """The bones of a skeleton file, in file order."""

    bone_datas: list[BoneData] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> SkeletonData:
        if not text:
            return cls()
        root = ET.fromstring(text)
        bones = []
        for node in root.findall("Bone"):
            attrs = node.attrib
            bones.append(BoneData(
                bone_id=attrs["m_id"],
                parent_name=attrs["parent"],
                image_filename=attrs["m_image"],
                pivot_x=float(attrs["pivot_x"]),
                pivot_y=float(attrs["pivot_y"]),
                handle_x=float(attrs["handle_x"]),
                handle_y=float(attrs["handle_y"]),
                frames=[_parse_frame(f) for f in node.findall("frame")],
            ))
        return cls(bones)

    @classmethod
    def load(cls, filename: str) -> SkeletonData:
        with open(filename, encoding="utf-8") as fh:
            return cls.parse(fh.read())