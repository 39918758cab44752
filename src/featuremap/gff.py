import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .feature import Feature, Location

GENE_TYPES = ('gene', 'transcript', 'mrna')


@dataclass
class Exon:
    start: int  # 1-based, closed
    stop: int


@dataclass
class Gene:
    id: str
    name: str
    chrom: str
    start: int
    stop: int
    strand: Optional[str] = None
    exons: List[Exon] = field(default_factory=list)

    def to_feature(self, link: Optional[str] = None) -> Feature:
        locations = [Location(e.start, e.stop) for e in self.exons
                     if self.start <= e.start <= e.stop <= self.stop]
        return Feature(self.name, self.start, self.stop, locations, self.strand, link)


def parse_attributes(attr_str: str) -> Dict[str, str]:
    """Parse a GFF3 (key=value) or GTF (key "value") attribute column"""
    attrs = {}
    for part in attr_str.split(';'):
        part = part.strip()
        if not part:
            continue
        if '=' in part:
            key, val = part.split('=', 1)
        else:
            pieces = part.split(' ', 1)
            if len(pieces) != 2:
                continue
            key, val = pieces
        attrs[key.strip()] = val.strip().strip('"')
    return attrs


def parse_gff(gff_path: str, chrom: Optional[str] = None, start: Optional[int] = None, stop: Optional[int] = None) -> List[Gene]:
    """Collect genes (with their exons) from a GFF3/GTF file.

    Coordinates stay 1-based and closed, as in the file. Exons are attached to
    their gene through the Parent attribute (via the transcript) or gene_id.
    Only genes on chrom overlapping [start, stop] are returned, sorted by start.
    """
    if not os.path.exists(gff_path):
        raise FileNotFoundError(f"GFF file not found: {gff_path}")

    genes: Dict[str, Gene] = {}
    transcripts: Dict[str, str] = {}  # transcript id -> gene id
    exons = []  # (attrs, Exon), attached once every gene is known

    with open(gff_path, 'r') as f:
        for line in f:
            if line.startswith('#'):
                continue
            parts = line.rstrip('\n').split('\t')
            if len(parts) < 9:
                continue
            if chrom is not None and parts[0] != chrom:
                continue
            try:
                r_start = int(parts[3])
                r_stop = int(parts[4])
            except ValueError:
                continue
            r_type = parts[2].lower()
            strand = parts[6] if parts[6] in ('+', '-') else None
            attrs = parse_attributes(parts[8])

            if r_type in GENE_TYPES:
                if r_type == 'gene':
                    gene_id = attrs.get('ID') or attrs.get('gene_id')
                else:
                    gene_id = attrs.get('gene_id') or attrs.get('Parent') or attrs.get('ID')
                if not gene_id:
                    continue
                if gene_id not in genes:
                    name = attrs.get('gene_name') or attrs.get('Name') or gene_id
                    genes[gene_id] = Gene(gene_id, name, parts[0], r_start, r_stop, strand)
                transcript_id = attrs.get('transcript_id') or attrs.get('ID')
                if r_type != 'gene' and transcript_id:
                    transcripts[transcript_id] = gene_id
            elif r_type == 'exon':
                exons.append((attrs, Exon(r_start, r_stop)))

    for attrs, exon in exons:
        parent = attrs.get('Parent')
        gene_id = transcripts.get(parent) or (parent if parent in genes else attrs.get('gene_id'))
        gene = genes.get(gene_id)
        if gene is None:
            continue
        gene.exons.append(exon)
        gene.start = min(gene.start, exon.start)
        gene.stop = max(gene.stop, exon.stop)

    result = []
    for gene in genes.values():
        if start is not None and gene.stop < start:
            continue
        if stop is not None and gene.start > stop:
            continue
        gene.exons.sort(key=lambda e: e.start)
        result.append(gene)
    result.sort(key=lambda g: g.start)
    return result
