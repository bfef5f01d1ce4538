"""
Errors raised by the variant selection layer.
Views turn them into shopper-facing notices; they never reach the template.
"""


class SelectionError(Exception):
    """Base class for variant selection failures."""


class NoVariantSelected(SelectionError):
    """A cart or checkout action was requested without a transactable selection."""

    def __init__(self, message='no selection'):
        super().__init__(message)


class VariantNotFound(SelectionError):
    """The requested variant is not part of the product's variant sequence."""

    def __init__(self, variant_id):
        self.variant_id = variant_id
        super().__init__(f"Variant {variant_id} is not available for this product")
