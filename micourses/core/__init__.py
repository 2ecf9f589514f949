"""Domain core: exceptions, validation rules and credential helpers."""
