from .binding_payloads import binding_result_to_loggable

__all__ = ["binding_result_to_loggable"]
