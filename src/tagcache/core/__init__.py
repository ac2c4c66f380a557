"""Core building blocks shared across tagcache."""
