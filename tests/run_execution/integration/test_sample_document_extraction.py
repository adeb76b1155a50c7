"""End-to-end extraction over the bundled sample document."""

from __future__ import annotations

from pathlib import Path

from openapi_field_extractor.run_execution import ExtractionRequest, execute_field_extraction


def _sample_path() -> Path:
    return Path(__file__).resolve().parents[3] / "samples" / "sample-openapi.yaml"


def test_sample_document_flattens_to_expected_records() -> None:
    outcome = execute_field_extraction(ExtractionRequest(document=str(_sample_path())))

    summary = [(record.path, record.title, record.parents, record.type) for record in outcome.records]
    assert summary == [
        ("/v1/companies/{siren}", "SIREN", "Company", "string"),
        ("/v1/companies/{siren}", "Name", "Company", "string"),
        ("/v1/companies/{siren}", "Street", "Company > Address", "string"),
        ("/v1/companies/{siren}", "Postal code", "Company > Address", "string"),
        ("/v1/companies/{siren}", "Tags", "Company", "array"),
        ("/v1/companies/{siren}", "Tag", "Company", "string"),
        ("/v1/companies/{siren}", "Self link", "", "string"),
        ("/v1/companies/{siren}/officers", "First name", "Person", "string"),
        ("/v1/companies/{siren}/officers", "Last name", "Person", "string"),
        ("/v1/companies/{siren}/officers", "Role", "", "string"),
        ("/v1/payments/{id}", "Card number", "Payment > Method", "string"),
        ("/v1/payments/{id}", "IBAN", "Payment > Method", "string"),
        ("/v1/payments/{id}", "Amount", "Payment", "number"),
        ("/v1/categories/{id}", "Label", "Category", "string"),
        ("/v1/categories/{id}", "Children", "Category", "array"),
    ]
    assert outcome.skipped_paths == ("/v1/documents/{id}", "/v1/health")


def test_sample_document_examples_and_descriptions_are_rendered() -> None:
    outcome = execute_field_extraction(ExtractionRequest(document=str(_sample_path())))
    by_title = {record.title: record for record in outcome.records}

    assert by_title["SIREN"].example == "418166096"
    assert by_title["SIREN"].description.startswith("Nine digit company identifier")
    assert by_title["Postal code"].example == "75002"
    assert by_title["Amount"].example == "12.5"
    assert outcome.text is not None
    assert '"Nine digit company identifier, unique per legal unit"' in outcome.text


def test_sample_document_extraction_is_repeatable() -> None:
    request = ExtractionRequest(document=str(_sample_path()))

    assert execute_field_extraction(request).text == execute_field_extraction(request).text
