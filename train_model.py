# train_model.py
"""
Hoax detector: combine datasets, train TF-IDF + Logistic Regression,
evaluate, save model_hoax.zip and try two sample sentences.

Usage (from the folder holding true.csv and fake.csv):
    python train_model.py
"""
import csv
import io
import json
import zipfile
from dataclasses import asdict, dataclass

import joblib
import numpy as np
import pandas as pd
from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.linear_model import LogisticRegression
from sklearn.metrics import accuracy_score, f1_score, roc_auc_score
from sklearn.model_selection import train_test_split
from sklearn.pipeline import Pipeline

from combine_datasets import ensure_combined, unquote_field
from hoax_config import HoaxConfig
from text_helpers import clean_text

TEST_SIZE = 0.2
RANDOM_STATE = 42

SCHEMA = {
    "title": "string",
    "text": "string",
    "subject": "string",
    "date": "string",
    "label": "boolean",
}
LABEL_VALUES = {"true": True, "false": False, "1": True, "0": False}

MODEL_ENTRY = "model.joblib"
SCHEMA_ENTRY = "schema.json"

SAMPLE_TEXTS = (
    "Ular berkepala 5 ditemukan di desa Konoha",
    "Pemerintah Konoha membuka program beasiswa baru tahun ini",
)


@dataclass
class Metrics:
    accuracy: float
    roc_auc: float
    f1: float
    n_rows: int


@dataclass
class MetricsUnavailable:
    """Test partition is empty or holds a single class, so ROC-AUC is undefined."""
    reason: str
    n_rows: int


@dataclass
class Prediction:
    text: str
    is_hoax: bool
    probability: float


# -------------------------
# Data
# -------------------------
def load_combined(path) -> pd.DataFrame:
    """
    Read combined.csv splitting on every comma, the same way it was written.

    Quotes are not interpreted by the reader: a part such as `"December 31`
    (left half-quoted by the combiner) must not swallow the following rows.
    """
    too_long = []
    df = pd.read_csv(
        path,
        dtype=str,
        keep_default_na=False,
        quoting=csv.QUOTE_NONE,
        engine="python",
        on_bad_lines=too_long.append,
    )
    if too_long:
        print(f"⚠️ {len(too_long)} baris dengan jumlah kolom salah dilewati.")
    missing = [c for c in SCHEMA if c not in df.columns]
    if missing:
        raise ValueError(f"Kolom tidak ditemukan di {path}: {missing}")
    df = df[list(SCHEMA)].copy()

    for col in ("title", "text", "subject", "date"):
        df[col] = df[col].fillna("").map(unquote_field)

    labels = df["label"].astype(str).str.strip().str.lower().map(LABEL_VALUES)
    invalid = int(labels.isna().sum())
    if invalid:
        print(f"⚠️ {invalid} baris dengan label tidak valid dilewati.")
    df = df[labels.notna()].copy()
    df["label"] = labels[labels.notna()].astype(bool)
    return df.reset_index(drop=True)


def split_dataset(df):
    train_df, test_df = train_test_split(df, test_size=TEST_SIZE, random_state=RANDOM_STATE)
    return train_df, test_df


def describe_split(test_df):
    pos = int(test_df["label"].sum())
    neg = len(test_df) - pos
    print("--- Diagnostik Data ---")
    print(f"Total Data: {len(test_df)}")
    print(f"Positif (hoax): {pos}")
    print(f"Negatif (benar): {neg}")
    print("-----------------------")
    return pos, neg


# -------------------------
# Model
# -------------------------
def build_pipeline() -> Pipeline:
    return Pipeline([
        ("tfidf", TfidfVectorizer(preprocessor=clean_text, ngram_range=(1, 2), max_features=5000)),
        ("clf", LogisticRegression(max_iter=1000, random_state=RANDOM_STATE)),
    ])


def train_pipeline(train_df) -> Pipeline:
    pipe = build_pipeline()
    pipe.fit(train_df["text"], train_df["label"].to_numpy(dtype=bool))
    print("Pelatihan model selesai.")
    return pipe


def hoax_probabilities(pipe, texts):
    """P(hoax) for each text."""
    hoax_idx = list(pipe.classes_).index(True)
    return pipe.predict_proba(texts)[:, hoax_idx]


def evaluate_pipeline(pipe, test_df):
    y_true = test_df["label"].to_numpy(dtype=bool)
    if len(y_true) == 0:
        return MetricsUnavailable(reason="empty", n_rows=0)
    if len(np.unique(y_true)) < 2:
        return MetricsUnavailable(reason="single_class", n_rows=len(y_true))

    y_pred = pipe.predict(test_df["text"])
    y_proba = hoax_probabilities(pipe, test_df["text"])
    return Metrics(
        accuracy=float(accuracy_score(y_true, y_pred)),
        roc_auc=float(roc_auc_score(y_true, y_proba)),
        f1=float(f1_score(y_true, y_pred, pos_label=True)),
        n_rows=len(y_true),
    )


def report_evaluation(result):
    if isinstance(result, MetricsUnavailable):
        print("⚠️ Tidak dapat menghitung AUC: hanya satu kelas di data uji.")
        return
    print(f"Akurasi: {result.accuracy:.2%}")
    print(f"AUC: {result.roc_auc:.2%}")
    print(f"F1 Score: {result.f1:.2%}")


def save_metrics(result, path):
    if isinstance(result, MetricsUnavailable):
        payload = {"available": False, **asdict(result)}
    else:
        payload = {"available": True, **asdict(result)}
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=4)


# -------------------------
# Persistence
# -------------------------
def save_model(pipe, train_df, path):
    """Write the fitted pipeline and its training schema into one zip archive."""
    schema = {
        "columns": [{"name": c, "type": SCHEMA[c]} for c in train_df.columns if c in SCHEMA],
        "n_rows": len(train_df),
    }
    buffer = io.BytesIO()
    joblib.dump(pipe, buffer)
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        zf.writestr(MODEL_ENTRY, buffer.getvalue())
        zf.writestr(SCHEMA_ENTRY, json.dumps(schema, indent=2))


def load_model(path):
    with zipfile.ZipFile(path, "r") as zf:
        pipe = joblib.load(io.BytesIO(zf.read(MODEL_ENTRY)))
        schema = json.loads(zf.read(SCHEMA_ENTRY).decode("utf-8"))
    return pipe, schema


# -------------------------
# Inference
# -------------------------
def predict_text(pipe, text) -> Prediction:
    is_hoax = bool(pipe.predict([text])[0])
    probability = float(hoax_probabilities(pipe, [text])[0])
    return Prediction(text=text, is_hoax=is_hoax, probability=probability)


def print_prediction(prediction):
    print(f"Teks: {prediction.text}")
    print(f"Prediksi: {'HOAX' if prediction.is_hoax else 'BENAR'}")
    print(f"Probabilitas: {prediction.probability:.2%}")
    print("-----------------------------------")


# -------------------------
# Run
# -------------------------
def main(config=None):
    config = config or HoaxConfig()

    print("## 1. Memuat dan Memproses Data (Biner)...")
    ensure_combined(config)

    df = load_combined(config.combined_path)
    train_df, test_df = split_dataset(df)
    describe_split(test_df)

    print("\n## 2. Mendefinisikan Pipeline dan Melatih Model (Biner)...")
    pipe = train_pipeline(train_df)

    print("\n## 3. Mengevaluasi Model...")
    result = evaluate_pipeline(pipe, test_df)
    report_evaluation(result)
    save_metrics(result, config.metrics_path)

    save_model(pipe, train_df, config.model_path)
    print(f"\nModel disimpan ke: {config.model_path}")

    print("\n## 4. Uji Prediksi Contoh...")
    for text in SAMPLE_TEXTS:
        print_prediction(predict_text(pipe, text))


if __name__ == "__main__":
    main()
