import os
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .feature import Feature, Location


@dataclass
class BedBlock:
    """A block (exon) of a BED feature, 0-based half-open"""
    start: int
    end: int


@dataclass
class BedFeature:
    chrom: str
    start: int  # 0-based
    end: int    # exclusive
    name: Optional[str] = None
    strand: Optional[str] = None
    item_rgb: Optional[Tuple[int, int, int]] = None
    blocks: List[BedBlock] = field(default_factory=list)

    def to_feature(self, link: Optional[str] = None) -> Feature:
        """Convert to a Feature in 1-based closed coordinates"""
        name = self.name or f"{self.chrom}:{self.start + 1}-{self.end}"
        locations = [Location(b.start + 1, b.end) for b in self.blocks
                     if self.start <= b.start < b.end <= self.end]
        return Feature(name, self.start + 1, self.end, locations, self.strand, link, self.item_rgb)


def _parse_rgb(value: str) -> Optional[Tuple[int, int, int]]:
    parts = value.split(',')
    if len(parts) != 3:
        return None
    try:
        rgb = tuple(int(p) for p in parts)
    except ValueError:
        return None
    if not all(0 <= c <= 255 for c in rgb):
        return None
    return rgb


def _parse_blocks(parts: List[str], start: int) -> List[BedBlock]:
    try:
        count = int(parts[9])
        sizes = [int(x) for x in parts[10].rstrip(',').split(',') if x]
        starts = [int(x) for x in parts[11].rstrip(',').split(',') if x]
    except (ValueError, IndexError):
        return []
    if len(sizes) != count or len(starts) != count:
        return []
    return [BedBlock(start + s, start + s + size) for s, size in zip(starts, sizes)]


def parse_bed_line(line: str) -> Optional[BedFeature]:
    """Parse one BED line; headers, comments and malformed lines give None"""
    line = line.strip()
    if not line or line.startswith(('#', 'track', 'browser')):
        return None
    parts = line.split('\t')
    if len(parts) < 3:
        return None
    try:
        start = int(parts[1])
        end = int(parts[2])
    except ValueError:
        return None
    if end <= start:
        return None

    name = parts[3] if len(parts) > 3 and parts[3] != '.' else None
    strand = parts[5] if len(parts) > 5 and parts[5] in ('+', '-') else None
    item_rgb = _parse_rgb(parts[8]) if len(parts) > 8 and parts[8] not in ('.', '0') else None
    blocks = _parse_blocks(parts, start) if len(parts) > 11 else []
    return BedFeature(parts[0], start, end, name, strand, item_rgb, blocks)


def parse_bed(bed_path: str, chrom: Optional[str] = None, start: Optional[int] = None, end: Optional[int] = None) -> List[BedFeature]:
    """Parse a BED file, keeping features on chrom that overlap [start, end)"""
    if not os.path.exists(bed_path):
        raise FileNotFoundError(f"BED file not found: {bed_path}")

    features: List[BedFeature] = []
    with open(bed_path, 'r') as f:
        for line in f:
            feature = parse_bed_line(line)
            if feature is None:
                continue
            if chrom is not None and feature.chrom != chrom:
                continue
            if start is not None and feature.end <= start:
                continue
            if end is not None and feature.start >= end:
                continue
            features.append(feature)

    features.sort(key=lambda x: x.start)
    return features
