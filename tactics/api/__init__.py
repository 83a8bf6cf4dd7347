"""REST surface for inspecting and driving an encounter."""
