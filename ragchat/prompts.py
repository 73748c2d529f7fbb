"""Prompt templates for grounded answers."""

RAG_ANSWER_PROMPT = (
    "Tu es un assistant RAG pour le portfolio de Yaniss.\n"
    "Réponds UNIQUEMENT avec les informations ci-dessous.\n"
    "Si l'information n'y est pas, dis-le simplement.\n\n"
    "CONTEXT:\n{context}\n\n"
    "QUESTION:\n{question}\n\n"
    "RÉPONSE (en français, concise, claire):"
)

MISSING_QUESTION = 'Missing "q" in JSON body'
MISSING_TOKEN = "Missing HF_TOKEN env var"
