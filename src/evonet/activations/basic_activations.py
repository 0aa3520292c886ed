import numpy as np

# Saturation points: beyond these the exponential is not evaluated at all.
SIGMOID_CLAMP = 15.0
TANH_CLAMP    = 10.0

LEAKY_RELU_ALPHA = 0.01

def sigmoid_activation(z):
    z  = np.asarray(z, dtype=np.float64)
    zc = np.clip(z, -SIGMOID_CLAMP, SIGMOID_CLAMP)   # to prevent overflow when calculating exp
    y  = 1.0 / (1.0 + np.exp(-zc))
    y  = np.where(z < -SIGMOID_CLAMP, 0.0, y)
    y  = np.where(z >  SIGMOID_CLAMP, 1.0, y)
    return y[()] if y.ndim == 0 else y

def relu_activation(z):
    z = np.asarray(z, dtype=np.float64)
    y = np.maximum(0.0, z)
    return y[()] if y.ndim == 0 else y

def leaky_relu_activation(z, alpha=LEAKY_RELU_ALPHA):
    z = np.asarray(z, dtype=np.float64)
    y = np.where(z > 0, z, alpha * z)
    return y[()] if y.ndim == 0 else y

def tanh_activation(z):
    z   = np.asarray(z, dtype=np.float64)
    zc  = np.clip(z, -TANH_CLAMP, TANH_CLAMP)
    e2x = np.exp(2.0 * zc)
    y   = (e2x - 1.0) / (e2x + 1.0)
    y   = np.where(z >  TANH_CLAMP,  1.0, y)
    y   = np.where(z < -TANH_CLAMP, -1.0, y)
    return y[()] if y.ndim == 0 else y

activations = {
    "sigmoid"  : sigmoid_activation,
    "relu"     : relu_activation,
    "tanh"     : tanh_activation,
    "leakyRelu": leaky_relu_activation
    }

# 3-letter identifiers for each activation function
activation_codes = {
    "sigmoid"  : "SIG",
    "relu"     : "RLU",
    "tanh"     : "TNH",
    "leakyRelu": "LRL"
    }
