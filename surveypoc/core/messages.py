"""Localized message bundles keyed by locale, then by error code."""

from __future__ import annotations

EN_MESSAGES: dict[str, str] = {
    "validation_error": "Validation Error",
    "internal_error": "Internal Server Error",
    "question_not_found": "The question with id {id} was not found",
    "user_not_found": "The user with id {id} was not found",
    "missing": "This field is required",
    "missing.answers": "At least one answer must be submitted",
    "string_type": "Must be a string",
    "string_too_short": "Must contain at least {min_length} character(s)",
    "string_too_long": "Must contain at most {max_length} character(s)",
    "too_short": "Must contain at least {min_length} item(s)",
    "too_long": "Must contain at most {max_length} item(s)",
    "int_type": "Must be a valid integer",
    "int_parsing": "Must be a valid integer",
    "bool_parsing": "Must be a valid boolean",
    "list_type": "Must be a list",
    "greater_than": "Must be greater than {gt}",
    "greater_than_equal": "Must be greater than or equal to {ge}",
    "less_than": "Must be less than {lt}",
    "less_than_equal": "Must be less than or equal to {le}",
    "enum": "Must be one of {expected}",
    "json_invalid": "The request body is not valid JSON",
}

FR_MESSAGES: dict[str, str] = {
    "validation_error": "Erreur de validation",
    "internal_error": "Erreur interne du serveur",
    "question_not_found": "La question avec l'identifiant {id} est introuvable",
    "user_not_found": "L'utilisateur avec l'identifiant {id} est introuvable",
    "missing": "Ce champ est obligatoire",
    "missing.answers": "Au moins une réponse doit être soumise",
    "string_type": "Doit être une chaîne de caractères",
    "string_too_short": "Doit contenir au moins {min_length} caractère(s)",
    "string_too_long": "Doit contenir au plus {max_length} caractère(s)",
    "too_short": "Doit contenir au moins {min_length} élément(s)",
    "too_long": "Doit contenir au plus {max_length} élément(s)",
    "int_type": "Doit être un entier valide",
    "int_parsing": "Doit être un entier valide",
    "bool_parsing": "Doit être un booléen valide",
    "list_type": "Doit être une liste",
    "greater_than": "Doit être supérieur à {gt}",
    "greater_than_equal": "Doit être supérieur ou égal à {ge}",
    "less_than": "Doit être inférieur à {lt}",
    "less_than_equal": "Doit être inférieur ou égal à {le}",
    "enum": "Doit être l'une des valeurs {expected}",
    "json_invalid": "Le corps de la requête n'est pas un JSON valide",
}

BUNDLES: dict[str, dict[str, str]] = {
    "en": EN_MESSAGES,
    "fr": FR_MESSAGES,
}
