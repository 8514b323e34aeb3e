from .yaml_adapter import YamlAdapter

__all__ = ["YamlAdapter"]
