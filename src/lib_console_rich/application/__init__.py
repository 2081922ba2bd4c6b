"""Application layer: ports and use cases behind the console façade."""
