from cssbuild.serialization.json_codec import deserialize, serialize

__all__ = ["deserialize", "serialize"]
