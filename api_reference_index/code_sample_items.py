"""Logic for expanding code-samples containers into individual samples."""

from api_reference_index.content_items import CodeSample, CodeSamples
from api_reference_index.item_lookup import ItemLookup


def get_code_sample_items_from_code_samples(
    code_samples: CodeSamples, items: ItemLookup
) -> list[CodeSample]:
    """Resolve the samples of a code-samples container, keeping their order."""
    return [
        items.resolve(codename, CodeSample) for codename in code_samples.code_samples
    ]
