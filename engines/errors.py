"""
Service Delivery Cost Navigator — Error Taxonomy
Every failure the engines raise derives from CostModelError so callers
can handle the whole family with one except clause.
"""


class CostModelError(ValueError):
    """Base class for calculation failures. Nothing partial is returned."""


class UnknownModelError(CostModelError):
    def __init__(self, model):
        self.model = model
        super().__init__(f"Unknown model: {model!r}")


class UnknownSolutionError(CostModelError):
    def __init__(self, solution):
        self.solution = solution
        super().__init__(f"Unknown solution: {solution!r}")


class InvalidAllocationError(CostModelError):
    def __init__(self, platform_portion, vendor_portion):
        self.platform_portion = platform_portion
        self.vendor_portion = vendor_portion
        super().__init__(
            f"Platform and vendor portions cannot exceed 100% "
            f"(got {platform_portion:g} + {vendor_portion:g})")


class InvalidInputError(CostModelError):
    def __init__(self, field, reason):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")
