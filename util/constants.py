class InternalURIs:
    API = "/api"
    V1 = API + "/v1"
    UPLOAD = V1 + "/upload"
    ASK = V1 + "/ask"
    FILE = V1 + "/file/{documentId}"
    HIGHLIGHT = V1 + "/highlight"
