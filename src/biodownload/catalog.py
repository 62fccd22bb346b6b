"""Catalog of known bioinformatics ontology and annotation resources.

The catalog is built once, at import time, from the literal ``_ENTRIES`` table.
Construction validates every entry and fails with a single ``CatalogError``
listing all bad entries, so a broken table stops the process at startup rather
than surfacing later as an unusable resource.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from .errors import BioDownloadError, CatalogError, InvalidResourceError
from .resources import Resource

logger = logging.getLogger(__name__)

# (local file name, source URL)
_ENTRIES: tuple[tuple[str, str], ...] = (
    # Gene Ontology
    ("go.json", "http://purl.obolibrary.org/obo/go.json"),
    ("go.obo", "http://purl.obolibrary.org/obo/go.obo"),
    ("goa_human.gaf", "http://geneontology.org/gene-associations/goa_human.gaf"),
    ("goa_human.gaf.gz", "http://geneontology.org/gene-associations/goa_human.gaf.gz"),
    # NCBI / EBI / ExPASy FTP
    ("mim2gene_medgen", "ftp://ftp.ncbi.nlm.nih.gov/gene/DATA/mim2gene_medgen"),
    ("prosite.dat", "ftp://ftp.expasy.org/databases/prosite/prosite.dat"),
    (
        "hgnc_complete_set.txt",
        "ftp://ftp.ebi.ac.uk/pub/databases/genenames/hgnc/tsv/hgnc_complete_set.txt",
    ),
    (
        "Homo_sapiens_gene_info.gz",
        "ftp://ftp.ncbi.nih.gov/gene/DATA/GENE_INFO/Mammalia/Homo_sapiens.gene_info.gz",
    ),
    # Mondo
    ("mondo.json", "http://purl.obolibrary.org/mondo/mondo.json"),
    ("mondo.owl", "http://purl.obolibrary.org/mondo/mondo.owl"),
    # Environmental conditions, treatments and exposures ontology
    (
        "ecto.json",
        "https://raw.githubusercontent.com/EnvironmentOntology/environmental-exposure-ontology/master/ecto.json",
    ),
    (
        "ecto.owl",
        "https://raw.githubusercontent.com/EnvironmentOntology/environmental-exposure-ontology/master/ecto.owl",
    ),
    # Medical action ontology
    ("maxo.json", "https://raw.githubusercontent.com/monarch-initiative/MAxO/master/maxo.json"),
    ("maxo.owl", "https://raw.githubusercontent.com/monarch-initiative/MAxO/master/maxo.owl"),
    ("maxo.obo", "https://raw.githubusercontent.com/monarch-initiative/MAxO/master/maxo.obo"),
    # Human Phenotype Ontology
    (
        "hp.json",
        "https://raw.githubusercontent.com/obophenotype/human-phenotype-ontology/master/hp.json",
    ),
    (
        "hp.obo",
        "https://raw.githubusercontent.com/obophenotype/human-phenotype-ontology/master/hp.obo",
    ),
    ("phenotype.hpoa", "http://purl.obolibrary.org/obo/hp/hpoa/phenotype.hpoa"),
)


def build_catalog(entries: Iterable[tuple[str, str]]) -> Mapping[str, Resource]:
    """Construct a read-only catalog from ``(name, url)`` pairs.

    Args:
        entries: Pairs of local file name and source URL.

    Returns:
        Read-only mapping of resource name to Resource.

    Raises:
        CatalogError: If any entry has an empty name, a malformed URL, or a
            name already used by an earlier entry. All failures are collected
            before raising.
    """
    resources: dict[str, Resource] = {}
    errors: list[BioDownloadError] = []
    for name, url in entries:
        try:
            resource = Resource.create(name, url)
        except BioDownloadError as exc:
            logger.error("Invalid catalog entry %r (%s): %s", name, url, exc)
            errors.append(exc)
            continue
        if resource.name in resources:
            duplicate = InvalidResourceError(f"Duplicate resource name: {resource.name}")
            logger.error("Invalid catalog entry %r (%s): %s", name, url, duplicate)
            errors.append(duplicate)
            continue
        resources[resource.name] = resource

    if errors:
        raise CatalogError(errors)
    return MappingProxyType(resources)


CATALOG: Mapping[str, Resource] = build_catalog(_ENTRIES)

GO_JSON = CATALOG["go.json"]
GO_OBO = CATALOG["go.obo"]
MEDGENE_2MIM = CATALOG["mim2gene_medgen"]
PROSITE = CATALOG["prosite.dat"]
HGNC = CATALOG["hgnc_complete_set.txt"]
GO_GAF = CATALOG["goa_human.gaf"]
GO_GAFGZ = CATALOG["goa_human.gaf.gz"]
MONDO_JSON = CATALOG["mondo.json"]
MONDO_OWL = CATALOG["mondo.owl"]
ECTO_JSON = CATALOG["ecto.json"]
ECTO_OWL = CATALOG["ecto.owl"]
MAXO_JSON = CATALOG["maxo.json"]
MAXO_OWL = CATALOG["maxo.owl"]
MAXO_OBO = CATALOG["maxo.obo"]
HP_JSON = CATALOG["hp.json"]
HP_OBO = CATALOG["hp.obo"]
PHENOTYPE_HP = CATALOG["phenotype.hpoa"]
GENE_INFO = CATALOG["Homo_sapiens_gene_info.gz"]


def get_resource(name: str) -> Resource:
    try:
        return CATALOG[name]
    except KeyError as exc:
        raise ValueError(f"Unknown resource: {name}") from exc


def list_resources() -> list[Resource]:
    return sorted(CATALOG.values(), key=lambda resource: resource.name)
