"""Reference helpers - correlate records across collections by string id"""
from typing import Any, Dict, Iterable, List


def reference_key(ref: Any) -> str:
    return str(ref)


def expand_references(refs: Iterable, docs_by_id: Dict[str, Dict]) -> List[Dict]:
    """Replace references with their documents, keeping order and dropping dangling ones"""
    expanded = []
    for ref in refs or []:
        doc = docs_by_id.get(reference_key(ref))
        if doc is not None:
            expanded.append(doc)
    return expanded


def collect_references(docs: Iterable[Dict], field: str) -> List:
    """Distinct references held in `field` across documents, first-seen order"""
    seen = {}
    for doc in docs:
        for ref in doc.get(field) or []:
            seen.setdefault(reference_key(ref), ref)
    return list(seen.values())
