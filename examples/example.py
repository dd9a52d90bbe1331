import os

from vecthrust import Vector, process_input_file

a = Vector([1.0, 2.0])
b = Vector([0.0, 4.0])
print(a + b)
print(a - b)
print(a * 2.0)

# Run a batch of operations described in JSON
results = process_input_file(
    input_path=os.path.join(os.path.dirname(__file__), "configs", "displacements.json"),
    options={"verbose": True}
)

for result in results["results"]:
    print(f"{result['name']}: {result.get('vector', result.get('value'))}")
