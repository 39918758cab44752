"""Clickable image maps for drawn panels"""
from dataclasses import dataclass, field
from typing import List, Optional
from xml.dom import minidom
from xml.etree.ElementTree import Element, SubElement, tostring

MAP_NAME = "image_map"


@dataclass
class ImageMapArea:
    left: int
    top: int
    right: int
    bottom: int
    url: Optional[str] = None

    @property
    def coords(self) -> str:
        return f"{self.left},{self.top},{self.right},{self.bottom}"


@dataclass
class ImageMap:
    name: str = MAP_NAME
    areas: List[ImageMapArea] = field(default_factory=list)

    def add_area(self, left: int, top: int, right: int, bottom: int, url: Optional[str] = None) -> ImageMapArea:
        area = ImageMapArea(int(left), int(top), int(right), int(bottom), url)
        self.areas.append(area)
        return area

    def to_element(self) -> Element:
        el = Element("map", {"name": self.name})
        for area in self.areas:
            attrs = {"shape": "rect", "coords": area.coords}
            if area.url is not None:
                attrs["href"] = area.url
            else:
                attrs["nohref"] = "nohref"
            SubElement(el, "area", attrs)
        return el

    def to_html(self) -> str:
        return _pretty(self.to_element())


def _pretty(el: Element) -> str:
    reparsed = minidom.parseString(tostring(el, encoding="unicode"))
    return reparsed.documentElement.toprettyxml(indent="  ")


def html_document(image_map: ImageMap, image_src: str) -> str:
    """An HTML page showing image_src with image_map attached"""
    html = Element("html")
    body = SubElement(html, "body")
    body.append(image_map.to_element())
    SubElement(body, "img", {"border": "1", "src": image_src, "usemap": f"#{image_map.name}"})
    return _pretty(html)


def write_html_document(path: str, image_map: ImageMap, image_src: str) -> None:
    with open(path, "w") as f:
        f.write(html_document(image_map, image_src))
