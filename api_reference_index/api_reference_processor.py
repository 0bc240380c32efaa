"""Flattening of an API reference specification into search-index records."""

import logging
from collections.abc import Iterable

from api_reference_index.code_sample_items import (
    get_code_sample_items_from_code_samples,
)
from api_reference_index.content_items import (
    Category,
    CodeSamples,
    DescriptionItem,
    PathOperation,
    Response,
    Specification,
)
from api_reference_index.description_items import get_description_items
from api_reference_index.item_lookup import ItemLookup
from api_reference_index.record_creators import (
    create_generic_description_record,
    create_generic_record_from_description_content,
    create_response_description_content_record,
    create_specification_description_record,
)
from api_reference_index.records import (
    API_SECTION,
    FinalRecord,
    PartialRecord,
    with_unique_object_ids,
)
from api_reference_index.rich_text import get_child_codenames_from_rich_text

logger = logging.getLogger(__name__)


class ApiReferenceProcessor:
    """Walks a specification and produces one record per indexable text unit.

    The traversal is depth first and follows the literal order of
    ``categories``, ``path_operations``, ``code_samples`` and the response
    references in the ``responses`` rich text. The resulting order is stable
    across runs so that index updates can be diffed.
    """

    def __init__(self, items: ItemLookup) -> None:
        """Initialize the processor with the lookup of all content items."""
        self.items = items

    def process_specification(self, specification: Specification) -> list[FinalRecord]:
        """Return the stamped, non-empty records of a specification.

        Raises ContentLookupError if any referenced codename is missing,
        resolves to an item of the wrong type or embeds chunks in a loop.
        """
        specification_record = create_generic_record_from_description_content(
            specification,
            specification.title + specification.version,
        )

        records = [specification_record]
        records.extend(
            self._create_records_from_specification_description(specification)
        )
        records.extend(self._process_categories(specification.categories))

        final_records = [
            FinalRecord.from_partial(
                record,
                id=specification.id,
                title=specification.title,
                section=API_SECTION,
            )
            for record in with_unique_object_ids(records)
        ]
        non_empty = [record for record in final_records if record.content]

        logger.debug(
            "Specification %r: %d records, %d dropped as empty",
            specification.codename,
            len(non_empty),
            len(final_records) - len(non_empty),
        )
        return non_empty

    def _create_records_from_specification_description(
        self, specification: Specification
    ) -> list[PartialRecord]:
        create = create_specification_description_record(specification)
        return [
            create(item)
            for item in get_description_items(specification.description, self.items)
        ]

    def _process_categories(self, codenames: Iterable[str]) -> list[PartialRecord]:
        records: list[PartialRecord] = []
        for codename in codenames:
            category = self.items.resolve(codename, Category)
            records.extend(self._create_records_from_category_description(category))
            records.extend(self._process_path_operations(category.path_operations))
        return records

    def _create_records_from_category_description(
        self, category: Category
    ) -> list[PartialRecord]:
        create = create_generic_description_record(category)
        records = [
            create(item)
            for item in get_description_items(category.description, self.items)
        ]
        records.append(
            create_generic_record_from_description_content(category, category.name)
        )
        return records

    def _process_path_operations(self, codenames: Iterable[str]) -> list[PartialRecord]:
        records: list[PartialRecord] = []
        for codename in codenames:
            path_operation = self.items.resolve(codename, PathOperation)
            records.extend(
                self._create_records_from_path_operation_description(path_operation)
            )
        return records

    def _create_records_from_path_operation_description(
        self, path_operation: PathOperation
    ) -> list[PartialRecord]:
        # Code samples are attributed to the path operation like description items
        description_items = get_description_items(
            path_operation.description, self.items
        )
        description_items.extend(self._collect_code_sample_items(path_operation))

        create = create_generic_description_record(path_operation)
        records = [create(item) for item in description_items]
        records.extend(self._process_responses(path_operation))
        records.append(
            create_generic_record_from_description_content(
                path_operation, path_operation.name
            )
        )
        return records

    def _collect_code_sample_items(
        self, path_operation: PathOperation
    ) -> list[DescriptionItem]:
        code_sample_items: list[DescriptionItem] = []
        for codename in path_operation.code_samples:
            code_samples = self.items.resolve(codename, CodeSamples)
            code_sample_items.extend(
                get_code_sample_items_from_code_samples(code_samples, self.items)
            )
        return code_sample_items

    def _process_responses(self, path_operation: PathOperation) -> list[PartialRecord]:
        responses = [
            self.items.resolve(codename, Response)
            for codename in get_child_codenames_from_rich_text(path_operation.responses)
        ]
        records: list[PartialRecord] = []
        for response in responses:
            records.extend(
                self._create_records_from_response_description(response, path_operation)
            )
        return records

    def _create_records_from_response_description(
        self, response: Response, path_operation: PathOperation
    ) -> list[PartialRecord]:
        # Description items of a response belong to the path operation's page
        create = create_generic_description_record(path_operation, response)
        records = [
            create(item)
            for item in get_description_items(response.description, self.items)
        ]
        records.append(
            create_response_description_content_record(response, path_operation)
        )
        return records
